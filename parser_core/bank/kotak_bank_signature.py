from ..compiled_patterns import CompiledPatterns
from .bank_signature import BankSignature, BodyTemplate, SenderMatcher, TemplateKind
from .base_indian_templates import build_indian_templates

F = CompiledPatterns.Fragments

KOTAK_TEMPLATES = (
    # Sent Rs.500.00 from Kotak Bank AC X1234 to zomato@hdfcbank on 15-12-23.UPI Ref 123456789012.
    BodyTemplate.build(
        "kotak_sent", TemplateKind.DEBIT,
        rf"\b(?P<direction>Sent)\s+{F.AMOUNT}\s+from\s+Kotak\s+Bank\s+{F.ACCOUNT_WORD}\s*{F.ACCOUNT}"
        rf"\s+to\s+{F.MERCHANT}",
    ),
    # Received Rs.500.00 in your Kotak Bank AC X1234 from john@okaxis on 15-12-23.UPI Ref:123456789012.
    BodyTemplate.build(
        "kotak_received", TemplateKind.CREDIT,
        rf"\b(?P<direction>Received)\s+{F.AMOUNT}\s+in\s+your\s+Kotak\s+Bank\s+{F.ACCOUNT_WORD}\s*{F.ACCOUNT}"
        rf"\s+from\s+{F.MERCHANT}",
    ),
)

KOTAK = BankSignature(
    code="KOTAK",
    name="Kotak Mahindra Bank",
    sender_matchers=(
        SenderMatcher.contains("KOTAKB"),
        SenderMatcher.contains("KKBANK"),
        SenderMatcher.exact("KOTAK"),
    ),
    templates=build_indian_templates(KOTAK_TEMPLATES),
)
