import re
from enum import Enum
from typing import Optional

from .bank.bank_signature import BodyTemplate
from .compiled_patterns import CompiledPatterns


class Channel(Enum):
    UPI = "UPI"
    NEFT = "NEFT"
    IMPS = "IMPS"
    CARD = "CARD"
    ATM = "ATM"
    NETBANKING = "NETBANKING"
    UNKNOWN = "UNKNOWN"


# Explicit rail tokens first, generic card cues last. RTGS has no bucket of its own.
CHANNEL_PRIORITY = (
    (CompiledPatterns.Channel.UPI, Channel.UPI),
    (CompiledPatterns.Channel.NEFT, Channel.NEFT),
    (CompiledPatterns.Channel.IMPS, Channel.IMPS),
    (CompiledPatterns.Channel.RTGS, Channel.NETBANKING),
    (CompiledPatterns.Channel.NETBANKING, Channel.NETBANKING),
    (CompiledPatterns.Channel.ATM, Channel.ATM),
    (CompiledPatterns.Channel.CARD, Channel.CARD),
)


def classify_channel(body: str, template: Optional[BodyTemplate] = None,
                     match: Optional["re.Match[str]"] = None) -> Channel:
    """
    Determines the settlement rail of a message.

    Scans the template's ``channel`` span when it captured text, otherwise the
    whole body, then falls back to the template's default rail. A message with
    no rail keyword is UNKNOWN, never rejected.
    """
    text = body
    if template is not None and match is not None and template.defines("channel"):
        span = match.group("channel")
        if span:
            text = span

    for pattern, channel in CHANNEL_PRIORITY:
        if pattern.search(text):
            return channel
    if template is not None and template.fallback_channel:
        return Channel(template.fallback_channel)
    return Channel.UNKNOWN
