import logging
from typing import Iterable, List, Optional, Tuple

from .bank_signature import BankSignature

logger = logging.getLogger(__name__)


class BankSignatureRegistry:
    """
    Read-only lookup from SMS sender ids to bank signatures.

    Signatures are tested in registration order and the first match wins.
    The registry is frozen at construction, so lookups are safe from any
    number of threads.
    """

    def __init__(self, signatures: Iterable[BankSignature]):
        self._signatures: Tuple[BankSignature, ...] = tuple(signatures)
        codes = [s.code for s in self._signatures]
        if len(set(codes)) != len(codes):
            raise ValueError(f"Duplicate bank codes in signature table: {codes}")

    def __len__(self) -> int:
        return len(self._signatures)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BankSignatureRegistry):
            return NotImplemented
        return self._signatures == other._signatures

    def __hash__(self) -> int:
        return hash(self._signatures)

    def resolve_bank(self, sender: str) -> Optional[BankSignature]:
        """Returns the signature for the given sender, or None for unknown senders."""
        for signature in self._signatures:
            if signature.can_handle(sender):
                return signature
        logger.debug("No bank signature for sender: %s", sender)
        return None

    def get(self, code: str) -> Optional[BankSignature]:
        for signature in self._signatures:
            if signature.code == code:
                return signature
        return None

    def codes(self) -> List[str]:
        return [s.code for s in self._signatures]

    def all(self) -> Tuple[BankSignature, ...]:
        return self._signatures

    def is_known_sender(self, sender: str) -> bool:
        return self.resolve_bank(sender) is not None
