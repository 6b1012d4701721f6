from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .parsed_transaction import ParsedTransaction


class PipelineState(Enum):
    SENDER_RESOLVED = "SENDER_RESOLVED"
    TEMPLATE_MATCHED = "TEMPLATE_MATCHED"
    FIELDS_EXTRACTED = "FIELDS_EXTRACTED"
    VALIDATED = "VALIDATED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class RejectionReason(Enum):
    UNKNOWN_BANK = "UNKNOWN_BANK"
    NO_TEMPLATE_MATCH = "NO_TEMPLATE_MATCH"
    INFORMATIONAL = "INFORMATIONAL"
    FIELD_EXTRACTION_FAILED = "FIELD_EXTRACTION_FAILED"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_ACCOUNT_TAIL = "INVALID_ACCOUNT_TAIL"
    AMBIGUOUS_DIRECTION = "AMBIGUOUS_DIRECTION"


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of one pass through the pipeline: either a transaction or a rejection.

    ``state`` is ACCEPTED or REJECTED. ``reached`` is the last state the
    message got through, None when the sender itself was unknown.
    """
    state: PipelineState
    reached: Optional[PipelineState] = None
    transaction: Optional[ParsedTransaction] = None
    rejection: Optional[RejectionReason] = None
    bank: Optional[str] = None
    template: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.state is PipelineState.ACCEPTED

    @classmethod
    def accept(cls, transaction: ParsedTransaction, template: str) -> "ParseOutcome":
        return cls(
            state=PipelineState.ACCEPTED,
            reached=PipelineState.VALIDATED,
            transaction=transaction,
            bank=transaction.bank,
            template=template,
        )

    @classmethod
    def reject(cls, reason: RejectionReason, reached: Optional[PipelineState] = None,
               bank: Optional[str] = None, template: Optional[str] = None) -> "ParseOutcome":
        return cls(state=PipelineState.REJECTED, reached=reached, rejection=reason,
                   bank=bank, template=template)
