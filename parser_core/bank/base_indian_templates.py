"""
Body templates shared by Indian bank signatures.

Templates are tried in order and the first match wins, so the tuple built by
``build_indian_templates`` always reads: informational guards, bank-specific
dialect templates, then the common transfer, card, debit and credit shapes
(most specific first).
"""
from typing import Iterable, Tuple

from ..compiled_patterns import CompiledPatterns
from .bank_signature import BodyTemplate, TemplateKind

F = CompiledPatterns.Fragments

# Messages that mention money but are not a completed transaction.
INFORMATIONAL_TEMPLATES = (
    BodyTemplate.build(
        "otp", TemplateKind.INFORMATIONAL,
        r"\b(?:OTP|one[\s-]?time\s+password|verification\s+code)\b",
    ),
    BodyTemplate.build(
        "upcoming_debit", TemplateKind.INFORMATIONAL,
        r"\bwill\s+be\s+(?:debited|deducted|charged)\b"
        r"|\be-?mandate\b|\bmandate\s+(?:is\s+)?(?:set|created|registered)\b",
    ),
    BodyTemplate.build(
        "payment_request", TemplateKind.INFORMATIONAL,
        r"\b(?:has\s+requested|payment\s+request|collect\s+request"
        r"|requesting\s+payment|ignore\s+if\s+already\s+paid)\b",
    ),
    BodyTemplate.build(
        "due_reminder", TemplateKind.INFORMATIONAL,
        r"\b(?:is\s+due|due\s+(?:on|by|date)|is\s+overdue"
        r"|min(?:imum)?\.?\s+(?:amt|amount)\s+due|total\s+(?:amt|amount)\s+due"
        r"|statement\s+(?:is\s+|has\s+been\s+)?generated)\b",
    ),
    BodyTemplate.build(
        "promotion", TemplateKind.INFORMATIONAL,
        r"\b(?:congratulations|pre-?approved|you\s+have\s+won|you'?ve\s+won|lucky\s+draw)\b"
        r"|\bclaim\s+(?:your\s+)?(?:prize|reward)\b",
    ),
    # Loan disbursals, EMIs and limit changes are neither income nor spend.
    # "Avl Limit" on card spends must not match.
    BodyTemplate.build(
        "loan_or_limit", TemplateKind.INFORMATIONAL,
        r"\b(?:loan|EMI|disburs(?:al|ed|ement)|repayment|overdraft|top[\s-]?up\s+loan|eligible)\b"
        r"|\b(?:credit\s+)?limit\s+(?:has\s+been\s+|is\s+)?(?:increased?|enhanced?|decreased?|reduced)\b"
        r"|\b(?:increase|enhance)\s+(?:your\s+)?(?:credit\s+)?limit\b",
    ),
)

TRANSFER_TEMPLATES = (
    # Rs.5,000.00 transferred from A/c XX1234 to A/c XX5678 on 15-12-2023 12:00:00.
    BodyTemplate.build(
        "transfer_out", TemplateKind.TRANSFER,
        rf"{F.AMOUNT}\s+(?P<direction>transferred\s+from)\s+(?:your\s+)?{F.ACCOUNT_WORD}\s*{F.ACCOUNT}"
        rf"\s+to\s+(?:your\s+)?{F.ACCOUNT_WORD}\s*{F.COUNTER_ACCOUNT}",
    ),
    BodyTemplate.build(
        "transfer_in", TemplateKind.TRANSFER,
        rf"{F.AMOUNT}\s+(?P<direction>transferred\s+to)\s+(?:your\s+)?{F.ACCOUNT_WORD}\s*{F.ACCOUNT}"
        rf"\s+from\s+(?:your\s+)?{F.ACCOUNT_WORD}\s*{F.COUNTER_ACCOUNT}",
    ),
)

CARD_TEMPLATES = (
    # Rs.1,250.00 spent on ICICI Bank Credit Card XX4321 at AMAZON on 15-12-2023 16:45:20.
    BodyTemplate.build(
        "card_spent", TemplateKind.CARD,
        rf"{F.AMOUNT}\s+(?P<direction>spent)\s+(?:on|using|via)\s+(?:your\s+)?(?P<channel>[A-Za-z ]*?Card)"
        rf"\s+(?:(?:no\.?|ending(?:\s+with)?)\s+)?{F.ACCOUNT}(?:\s+at\s+{F.MERCHANT})?",
    ),
    BodyTemplate.build(
        "card_debited", TemplateKind.CARD,
        rf"{F.AMOUNT}\s+(?P<direction>debited)\s+(?:on|via|using|from)\s+(?:your\s+)?(?P<channel>[A-Za-z ]*?Card)"
        rf"\s+(?:(?:no\.?|ending(?:\s+with)?)\s+)?{F.ACCOUNT}{F.ON_DATE}(?:\s+at\s+{F.MERCHANT})?",
    ),
)

DEBIT_TEMPLATES = (
    # Rs.500.00 debited from A/c XX1234 on 15-12-2023 14:30:15 at ZOMATO. UPI Ref: 123456789.
    BodyTemplate.build(
        "debit", TemplateKind.DEBIT,
        rf"{F.AMOUNT}\s+(?P<direction>debited(?:\s+from)?)\s+(?:your\s+)?{F.ACCOUNT_WORD}\s*{F.ACCOUNT}"
        rf"{F.ON_DATE}(?:\s+(?:at|to|towards|for)\s+"
        rf"(?:{F.ACCOUNT_WORD}\s*{F.COUNTER_ACCOUNT}|(?:VPA\s+)?{F.MERCHANT}))?",
    ),
    # Your A/c XX1234 has been debited by Rs.500.00 on 15-12-2023 to ZOMATO.
    BodyTemplate.build(
        "debit_account_first", TemplateKind.DEBIT,
        rf"{F.ACCOUNT_WORD}\s*{F.ACCOUNT}\s+(?:is\s+|has\s+been\s+)?(?P<direction>debited)\s+(?:by|for|with)"
        rf"\s+{F.AMOUNT}{F.ON_DATE}(?:\s+(?:at|to|towards|trf\s+to)\s+"
        rf"(?:{F.ACCOUNT_WORD}\s*{F.COUNTER_ACCOUNT}|(?:VPA\s+)?{F.MERCHANT}))?",
    ),
    # Rs.2,000.00 withdrawn from A/c XX1234 on 15-12-2023 at ATM MG ROAD.
    BodyTemplate.build(
        "withdrawal", TemplateKind.DEBIT,
        rf"{F.AMOUNT}\s+(?P<direction>withdrawn)\s+from\s+(?:your\s+)?{F.ACCOUNT_WORD}\s*{F.ACCOUNT}"
        rf"{F.ON_DATE}(?:\s+(?:at|from)\s+(?P<channel>ATM)\b)?",
    ),
)

CREDIT_TEMPLATES = (
    # Rs.10,000.00 credited to A/c XX5678 on 15-12-2023 10:15:30 by NEFT from A/C 1234567890.
    BodyTemplate.build(
        "credit", TemplateKind.CREDIT,
        rf"{F.AMOUNT}\s+(?P<direction>credited|deposited|received)\s+(?:to|in|into)\s+(?:your\s+)?"
        rf"{F.ACCOUNT_WORD}\s*{F.ACCOUNT}{F.ON_DATE}(?:\s+(?:by|via|through)\s+{F.RAIL}\b)?"
        rf"(?:\s+from\s+(?:{F.ACCOUNT_WORD}\s*{F.COUNTER_ACCOUNT}|(?:VPA\s+)?{F.MERCHANT}))?",
    ),
    # Your A/c XX5678 is credited with Rs.10,000.00 on 15-12-2023 by IMPS from A/c XX9012.
    BodyTemplate.build(
        "credit_account_first", TemplateKind.CREDIT,
        rf"{F.ACCOUNT_WORD}\s*{F.ACCOUNT}\s+(?:is\s+|has\s+been\s+)?(?P<direction>credited)\s+(?:by|for|with)"
        rf"\s+{F.AMOUNT}{F.ON_DATE}(?:\s+(?:by|via|through)\s+{F.RAIL}\b)?"
        rf"(?:\s+from\s+(?:{F.ACCOUNT_WORD}\s*{F.COUNTER_ACCOUNT}|(?:VPA\s+)?{F.MERCHANT}))?",
    ),
)


def build_indian_templates(specific: Iterable[BodyTemplate] = ()) -> Tuple[BodyTemplate, ...]:
    """Returns the ordered template tuple for a bank, with its own dialect templates slotted in."""
    return (
        INFORMATIONAL_TEMPLATES
        + tuple(specific)
        + TRANSFER_TEMPLATES
        + CARD_TEMPLATES
        + DEBIT_TEMPLATES
        + CREDIT_TEMPLATES
    )
