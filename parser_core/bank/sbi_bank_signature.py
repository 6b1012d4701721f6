from ..compiled_patterns import CompiledPatterns
from .bank_signature import BankSignature, BodyTemplate, SenderMatcher, TemplateKind
from .base_indian_templates import build_indian_templates

F = CompiledPatterns.Fragments

# SBI UPI alerts omit the currency symbol on debits.
BARE_AMOUNT = r"(?P<amount>\d[\d,]*(?:\.\d+)*)"

SBI_TEMPLATES = (
    # Dear UPI user A/C X1234 debited by 500.0 on date 15Dec23 trf to ZOMATO Refno 123456789012.
    BodyTemplate.build(
        "sbi_upi_debit", TemplateKind.DEBIT,
        rf"\bDear\s+(?P<channel>UPI)\s+user\s+A/C\s*{F.ACCOUNT}\s+(?P<direction>debited)\s+by\s+{BARE_AMOUNT}"
        r"\s+on\s+date\s+\S+\s+trf\s+to\s+(?P<merchant>[^\n]+?)(?=\s+Ref)",
    ),
    # Dear SBI UPI User, ur A/cX1234 credited by Rs500 on 15Dec23 by (Ref no 123456789012)
    BodyTemplate.build(
        "sbi_upi_credit", TemplateKind.CREDIT,
        rf"\bA/c\s*{F.ACCOUNT}\s+(?P<direction>credited)\s+by\s+{F.AMOUNT}",
    ),
)

SBI = BankSignature(
    code="SBI",
    name="State Bank of India",
    sender_matchers=(
        SenderMatcher.contains("SBIINB"),
        SenderMatcher.contains("SBIUPI"),
        SenderMatcher.contains("SBIBNK"),
        SenderMatcher.contains("SBIBK"),
        SenderMatcher.contains("ATMSBI"),
        SenderMatcher.exact("SBI"),
    ),
    templates=build_indian_templates(SBI_TEMPLATES),
)
