import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Pattern, Tuple

from ..compiled_patterns import CompiledPatterns


class TemplateKind(Enum):
    INFORMATIONAL = "INFORMATIONAL"
    TRANSFER = "TRANSFER"
    CARD = "CARD"
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class MatchMode(Enum):
    EXACT = "exact"
    PREFIX = "prefix"
    CONTAINS = "contains"


def normalize_sender(sender: str) -> str:
    """Uppercases the sender and drops everything but letters and digits."""
    return CompiledPatterns.Sender.NON_ALPHANUMERIC.sub("", sender.upper())


@dataclass(frozen=True)
class SenderMatcher:
    mode: MatchMode
    token: str

    def matches(self, normalized_sender: str) -> bool:
        token = normalize_sender(self.token)
        if self.mode is MatchMode.EXACT:
            return normalized_sender == token
        if self.mode is MatchMode.PREFIX:
            return normalized_sender.startswith(token)
        return token in normalized_sender

    @classmethod
    def exact(cls, token: str) -> "SenderMatcher":
        return cls(MatchMode.EXACT, token)

    @classmethod
    def prefix(cls, token: str) -> "SenderMatcher":
        return cls(MatchMode.PREFIX, token)

    @classmethod
    def contains(cls, token: str) -> "SenderMatcher":
        return cls(MatchMode.CONTAINS, token)


@dataclass(frozen=True)
class BodyTemplate:
    """
    One category of notification for a bank.

    The pattern carries the semantic roles as named groups: ``amount``,
    ``direction``, ``account`` and optionally ``channel``, ``merchant``,
    ``reference`` and ``counter_account``. Informational templates only need
    to match; they carry no roles.

    ``fallback_channel`` names the rail for dialects that never spell it out;
    it applies only when neither the channel span nor the body gives one.
    """
    name: str
    kind: TemplateKind
    pattern: Pattern[str]
    fallback_channel: Optional[str] = None

    @classmethod
    def build(cls, name: str, kind: TemplateKind, source: str,
              fallback_channel: Optional[str] = None) -> "BodyTemplate":
        return cls(name=name, kind=kind, pattern=re.compile(source, re.IGNORECASE),
                   fallback_channel=fallback_channel)

    def defines(self, role: str) -> bool:
        return role in self.pattern.groupindex

    def match(self, body: str) -> Optional["re.Match[str]"]:
        return self.pattern.search(body)


@dataclass(frozen=True)
class BankSignature:
    code: str
    name: str
    sender_matchers: Tuple[SenderMatcher, ...]
    templates: Tuple[BodyTemplate, ...] = field(default_factory=tuple)

    def can_handle(self, sender: str) -> bool:
        """Checks if messages from the given sender belong to this bank."""
        normalized = normalize_sender(sender)
        if not normalized:
            return False
        return any(m.matches(normalized) for m in self.sender_matchers)
