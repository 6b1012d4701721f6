from .bank_signature import BankSignature, SenderMatcher
from .base_indian_templates import build_indian_templates

YES = BankSignature(
    code="YES",
    name="Yes Bank",
    sender_matchers=(
        SenderMatcher.contains("YESBNK"),
        SenderMatcher.contains("YESBANK"),
    ),
    templates=build_indian_templates(),
)
