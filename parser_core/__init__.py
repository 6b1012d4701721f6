from .amount_parser import format_minor, parse_amount
from .bank import DEFAULT_SIGNATURES, BankSignature, BankSignatureRegistry, BodyTemplate, default_registry
from .channel import Channel
from .compiled_patterns import CompiledPatterns
from .constants import Constants
from .engine import (
    EngineAlreadyInitializedError,
    EngineNotInitializedError,
    ParserCoreError,
    SmsTransactionEngine,
    initialize,
    parse,
)
from .parse_outcome import ParseOutcome, PipelineState, RejectionReason
from .parsed_transaction import ParsedTransaction
from .transaction_type import TransactionType

__all__ = [
    "BankSignature",
    "BankSignatureRegistry",
    "BodyTemplate",
    "Channel",
    "CompiledPatterns",
    "Constants",
    "DEFAULT_SIGNATURES",
    "EngineAlreadyInitializedError",
    "EngineNotInitializedError",
    "ParseOutcome",
    "ParsedTransaction",
    "ParserCoreError",
    "PipelineState",
    "RejectionReason",
    "SmsTransactionEngine",
    "TransactionType",
    "default_registry",
    "format_minor",
    "initialize",
    "parse",
    "parse_amount",
]
