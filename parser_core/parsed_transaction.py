from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from .amount_parser import format_minor
from .channel import Channel
from .transaction_type import TransactionType


@dataclass(frozen=True)
class ParsedTransaction:
    """
    One transaction extracted from one SMS.

    ``amount_minor`` and ``balance_minor`` are in paise. ``timestamp`` is the
    ingestion time supplied by the caller in epoch millis; dates inside the
    body are never parsed into it. Dedup keys are left to the storage layer,
    which gets ``raw_sender``, ``raw_body`` and ``timestamp`` for that.
    """
    type: TransactionType
    amount_minor: int
    channel: Channel
    account_tail: str
    bank: str
    timestamp: int
    raw_sender: str
    raw_body: str
    merchant: Optional[str] = None
    is_transfer: bool = False
    reference: Optional[str] = None
    balance_minor: Optional[int] = None
    currency: str = "INR"

    @property
    def amount(self) -> Decimal:
        return Decimal(format_minor(self.amount_minor))

    @property
    def balance(self) -> Optional[Decimal]:
        if self.balance_minor is None:
            return None
        return Decimal(format_minor(self.balance_minor))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "amount_minor": self.amount_minor,
            "amount": format_minor(self.amount_minor),
            "channel": self.channel.value,
            "merchant": self.merchant,
            "account_tail": self.account_tail,
            "bank": self.bank,
            "is_transfer": self.is_transfer,
            "reference": self.reference,
            "balance_minor": self.balance_minor,
            "currency": self.currency,
            "timestamp": self.timestamp,
            "raw_sender": self.raw_sender,
            "raw_body": self.raw_body,
        }
