from .bank_signature import BankSignature, SenderMatcher
from .base_indian_templates import build_indian_templates

PNB = BankSignature(
    code="PNB",
    name="Punjab National Bank",
    sender_matchers=(
        SenderMatcher.contains("PNBSMS"),
        SenderMatcher.contains("PNBBNK"),
        SenderMatcher.exact("PNB"),
    ),
    templates=build_indian_templates(),
)
