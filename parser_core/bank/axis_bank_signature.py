from ..compiled_patterns import CompiledPatterns
from .bank_signature import BankSignature, BodyTemplate, SenderMatcher, TemplateKind
from .base_indian_templates import build_indian_templates

F = CompiledPatterns.Fragments

AXIS_TEMPLATES = (
    # INR 500.00 debited
    # A/c no. XX1234
    # 15-12-23, 14:30:15
    # UPI/P2M/123456789012/ZOMATO
    BodyTemplate.build(
        "axis_upi_debit", TemplateKind.DEBIT,
        rf"{F.AMOUNT}\s+(?P<direction>debited)\s+A/c\s+no\.\s*{F.ACCOUNT}\s+{F.DATE}[\s,]+{F.TIME}"
        r"\s+(?P<channel>UPI)/[^/\s]+/(?P<reference>\d+)/(?P<merchant>[^\n]+?)(?=\s*(?:\n|Not\s+you|$))",
    ),
    # Spent
    # Card no. XX4321
    # INR 1,250.00
    # 15-12-23 16:45:20
    # AMAZON
    BodyTemplate.build(
        "axis_card_spent", TemplateKind.CARD,
        rf"\b(?P<direction>Spent)\s+(?P<channel>Card)\s+no\.\s*{F.ACCOUNT}\s+{F.AMOUNT}\s+{F.DATE}[\s,]+{F.TIME}"
        r"(?:\s+IST)?\s+(?P<merchant>[^\n]+?)(?=\s*(?:\n|Avl\b|Not\s+you|$))",
    ),
)

AXIS = BankSignature(
    code="AXIS",
    name="Axis Bank",
    sender_matchers=(
        SenderMatcher.contains("AXISB"),
        SenderMatcher.exact("AXIS"),
    ),
    templates=build_indian_templates(AXIS_TEMPLATES),
)
