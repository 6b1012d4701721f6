from ..compiled_patterns import CompiledPatterns
from .bank_signature import BankSignature, BodyTemplate, SenderMatcher, TemplateKind
from .base_indian_templates import build_indian_templates

F = CompiledPatterns.Fragments

ICICI_TEMPLATES = (
    # ICICI Bank Acct XX1234 debited for Rs 240.00 on 28-Apr-24; DAKSHIN CAFE credited. UPI:412345678901.
    BodyTemplate.build(
        "icici_upi_debit", TemplateKind.DEBIT,
        rf"{F.ACCOUNT_WORD}\s*{F.ACCOUNT}\s+(?P<direction>debited)\s+(?:for|with)\s+{F.AMOUNT}{F.ON_DATE}"
        r"\s*;\s*(?P<merchant>[^;\n]+?)\s+credited",
    ),
    # INR 1,250.00 spent using ICICI Bank Card XX4321 on 15-Dec-23 on AMAZON. Avl Limit: INR 48,750.00
    BodyTemplate.build(
        "icici_card_spent", TemplateKind.CARD,
        rf"{F.AMOUNT}\s+(?P<direction>spent)\s+using\s+(?P<channel>ICICI\s+Bank\s+(?:Credit\s+)?Card)"
        rf"\s+{F.ACCOUNT}{F.ON_DATE}\s+on\s+{F.MERCHANT}",
    ),
)

ICICI = BankSignature(
    code="ICICI",
    name="ICICI Bank",
    sender_matchers=(
        SenderMatcher.contains("ICICIB"),
        SenderMatcher.contains("ICICIT"),
        SenderMatcher.contains("ICICBK"),
        SenderMatcher.exact("ICICI"),
    ),
    templates=build_indian_templates(ICICI_TEMPLATES),
)
