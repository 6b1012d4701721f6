from ..compiled_patterns import CompiledPatterns
from .bank_signature import BankSignature, BodyTemplate, SenderMatcher, TemplateKind
from .base_indian_templates import build_indian_templates

F = CompiledPatterns.Fragments

HDFC_TEMPLATES = (
    # Spent Rs.2,000.00 From HDFC Bank Card x1234 At AMAZON On 2024-01-15:10:20:30
    BodyTemplate.build(
        "hdfc_card_spent", TemplateKind.CARD,
        rf"\b(?P<direction>Spent)\s+{F.AMOUNT}\s+(?:From|On)\s+"
        rf"(?P<channel>HDFC\s+Bank\s+(?:Credit\s+|Debit\s+)?Card)\s+{F.ACCOUNT}\s+At\s+{F.MERCHANT}",
    ),
    # Sent Rs.500.00 From HDFC Bank A/C *1234 To ZOMATO On 15/12/23 Ref 123456789012
    # UPI-only alert that never names the rail.
    BodyTemplate.build(
        "hdfc_sent", TemplateKind.DEBIT,
        rf"\b(?P<direction>Sent)\s+{F.AMOUNT}\s+From\s+HDFC\s+Bank\s+{F.ACCOUNT_WORD}\s*{F.ACCOUNT}"
        rf"\s+To\s+(?:VPA\s+)?{F.MERCHANT}",
        fallback_channel="UPI",
    ),
)

HDFC = BankSignature(
    code="HDFC",
    name="HDFC Bank",
    sender_matchers=(
        SenderMatcher.contains("HDFCBK"),
        SenderMatcher.contains("HDFCBANK"),
        SenderMatcher.contains("HDFCBN"),
        SenderMatcher.exact("HDFC"),
    ),
    templates=build_indian_templates(HDFC_TEMPLATES),
)
