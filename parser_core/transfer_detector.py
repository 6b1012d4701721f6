from typing import Optional

from .bank.bank_signature import TemplateKind
from .channel import Channel
from .compiled_patterns import CompiledPatterns
from .constants import Constants


def count_account_references(body: str) -> int:
    return len(CompiledPatterns.Account.ANY_REFERENCE.findall(body))


def has_self_transfer_phrase(body: str) -> bool:
    lower = body.lower()
    return any(phrase in lower for phrase in Constants.Transfer.SELF_TRANSFER_PHRASES)


def has_debit_and_credit(body: str) -> bool:
    """One SMS reporting both legs of a movement, e.g. "debited from ... and credited to ..."."""
    lower = body.lower()
    return "debited" in lower and "credited" in lower


def is_transfer(kind: TemplateKind, channel: Channel, merchant: Optional[str], body: str) -> bool:
    """
    Flags movements between the user's own or linked accounts.

    Transfers are still DEBIT or CREDIT records; the flag only keeps them out
    of spend and income totals. Card spends are never transfers.
    """
    if kind is TemplateKind.TRANSFER:
        return True
    if channel is Channel.CARD or kind is TemplateKind.CARD:
        return False
    if channel in (Channel.NEFT, Channel.IMPS) and not merchant and count_account_references(body) >= 2:
        return True
    # UPI payments to a named merchant are spend even when the text says "transfer".
    if channel is Channel.UPI and merchant:
        return False
    return has_self_transfer_phrase(body) or has_debit_and_credit(body)
