"""
Secondary field extraction from a matched body template.

Each extractor takes the text of one capture span (or the whole body for the
optional fields) and returns a normalized value, or None when nothing usable
is there. None from an optional extractor is not an error.
"""
from typing import Optional

from .amount_parser import parse_amount
from .compiled_patterns import CompiledPatterns
from .constants import Constants
from .transaction_type import TransactionType


def extract_direction(span: Optional[str]) -> Optional[TransactionType]:
    """Maps a direction keyword onto DEBIT or CREDIT using the closed vocabulary."""
    if not span:
        return None
    keyword = CompiledPatterns.Cleaning.WHITESPACE.sub(" ", span.strip().lower())
    if keyword in Constants.Direction.DEBIT_KEYWORDS:
        return TransactionType.DEBIT
    if keyword in Constants.Direction.CREDIT_KEYWORDS:
        return TransactionType.CREDIT
    return None


def extract_account_tail(span: Optional[str]) -> Optional[str]:
    """
    Normalizes a masked account span such as ``xx4321`` or ``*1234`` to ``XX4321``.

    Unmasked account numbers are not account tails and yield None.
    """
    if not span:
        return None
    m = CompiledPatterns.Account.MASKED_TAIL.match(span.strip())
    if not m:
        return None
    return Constants.Parsing.ACCOUNT_TAIL_PREFIX + m.group("digits")


def is_valid_account_tail(tail: Optional[str]) -> bool:
    return bool(tail) and CompiledPatterns.Account.NORMALIZED_TAIL.match(tail) is not None


def clean_merchant_name(merchant: str) -> str:
    result = merchant.strip()
    vpa = CompiledPatterns.Cleaning.VPA_HANDLE.match(result)
    if vpa:
        result = vpa.group(1)
    result = CompiledPatterns.Cleaning.TRAILING_PARENTHESES.sub("", result)
    result = CompiledPatterns.Cleaning.REF_NUMBER_SUFFIX.sub("", result)
    result = CompiledPatterns.Cleaning.DATE_SUFFIX.sub("", result)
    result = CompiledPatterns.Cleaning.TIME_SUFFIX.sub("", result)
    result = CompiledPatterns.Cleaning.TRAILING_DASH.sub("", result)
    result = CompiledPatterns.Cleaning.PVT_LTD.sub("", result)
    result = CompiledPatterns.Cleaning.LTD.sub("", result)
    result = CompiledPatterns.Cleaning.TRAILING_PUNCTUATION.sub("", result)
    return CompiledPatterns.Cleaning.WHITESPACE.sub(" ", result).strip()


def is_valid_merchant_name(name: str) -> bool:
    return (
        len(name) >= Constants.Parsing.MIN_MERCHANT_NAME_LENGTH
        and any(c.isalpha() for c in name)
        and name.upper() not in Constants.Merchant.COMMON_WORDS
        and "@" not in name
        and CompiledPatterns.Account.ANY_REFERENCE.search(name) is None
    )


def extract_merchant(span: Optional[str]) -> Optional[str]:
    if not span:
        return None
    merchant = clean_merchant_name(span)
    if is_valid_merchant_name(merchant):
        return merchant
    return None


def extract_reference(span: Optional[str], body: str) -> Optional[str]:
    """Uses the template's reference span when present, else the common reference shapes."""
    if span and span.strip():
        return span.strip()
    for pattern in CompiledPatterns.Reference.ALL_PATTERNS:
        m = pattern.search(body)
        if m:
            return m.group(1).strip()
    return None


def extract_balance(body: str) -> Optional[int]:
    """Available balance in minor units; a malformed balance is simply absent."""
    for pattern in CompiledPatterns.Balance.ALL_PATTERNS:
        m = pattern.search(body)
        if m:
            return parse_amount(m.group(1))
    return None
