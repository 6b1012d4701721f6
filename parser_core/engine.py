"""
The parse pipeline.

A message moves through SENDER_RESOLVED, TEMPLATE_MATCHED, FIELDS_EXTRACTED
and VALIDATED before it is ACCEPTED; any stage can reject it. Rejections are
ordinary values on ``ParseOutcome``; ``parse`` collapses them to None.

``SmsTransactionEngine`` is the explicit object. The module-level
``initialize``/``parse`` pair wraps one engine for callers that want the
initialize-once, call-anywhere style.
"""
import logging
import re
import threading
from typing import Iterable, Optional, Tuple, Union

from .amount_parser import parse_amount
from .bank.bank_signature import BankSignature, BodyTemplate, TemplateKind
from .bank.bank_signature_registry import BankSignatureRegistry
from .channel import classify_channel
from .constants import Constants
from .extractors import (
    extract_account_tail,
    extract_balance,
    extract_direction,
    extract_merchant,
    extract_reference,
    is_valid_account_tail,
)
from .parse_outcome import ParseOutcome, PipelineState, RejectionReason
from .parsed_transaction import ParsedTransaction
from .transfer_detector import is_transfer

logger = logging.getLogger(__name__)


class ParserCoreError(Exception):
    """Base class for programmer errors raised by the engine."""


class EngineNotInitializedError(ParserCoreError):
    """parse() was called before initialize()."""


class EngineAlreadyInitializedError(ParserCoreError):
    """initialize() was called again with a different signature table."""


def _group(match: "re.Match[str]", template: BodyTemplate, role: str) -> Optional[str]:
    if not template.defines(role):
        return None
    return match.group(role)


def _preview(body: str) -> str:
    return body[:Constants.Parsing.LOG_PREVIEW_LENGTH]


class SmsTransactionEngine:
    """Turns (sender, body, timestamp) triples into ParsedTransaction records."""

    def __init__(self, registry: BankSignatureRegistry):
        self.registry = registry

    def parse(self, sender: str, body: str, timestamp: int) -> Optional[ParsedTransaction]:
        """Returns the transaction, or None when the message is not one."""
        return self.evaluate(sender, body, timestamp).transaction

    def evaluate(self, sender: str, body: str, timestamp: int) -> ParseOutcome:
        outcome = self._run(sender, body, timestamp)
        if outcome.accepted:
            logger.debug("Parsed %s transaction from %s via %s",
                         outcome.transaction.type.value, sender, outcome.template)
        else:
            logger.debug("Rejected (%s) message from %s: %s", outcome.rejection.value, sender,
                         _preview(body) if isinstance(body, str) else body)
        return outcome

    def _match_template(self, signature: BankSignature,
                        body: str) -> Optional[Tuple[BodyTemplate, "re.Match[str]"]]:
        for template in signature.templates:
            m = template.match(body)
            if m:
                return template, m
        return None

    def _run(self, sender: str, body: str, timestamp: int) -> ParseOutcome:
        # 1. Resolve sender
        if not isinstance(sender, str):
            return ParseOutcome.reject(RejectionReason.UNKNOWN_BANK)
        signature = self.registry.resolve_bank(sender)
        if signature is None:
            return ParseOutcome.reject(RejectionReason.UNKNOWN_BANK)
        bank = signature.code

        # 2. Match template
        if not isinstance(body, str):
            return ParseOutcome.reject(RejectionReason.NO_TEMPLATE_MATCH,
                                       PipelineState.SENDER_RESOLVED, bank)
        matched = self._match_template(signature, body)
        if matched is None:
            return ParseOutcome.reject(RejectionReason.NO_TEMPLATE_MATCH,
                                       PipelineState.SENDER_RESOLVED, bank)
        template, m = matched
        if template.kind is TemplateKind.INFORMATIONAL:
            return ParseOutcome.reject(RejectionReason.INFORMATIONAL,
                                       PipelineState.TEMPLATE_MATCHED, bank, template.name)

        def reject(reason: RejectionReason, reached: PipelineState) -> ParseOutcome:
            return ParseOutcome.reject(reason, reached, bank, template.name)

        # 3. Extract fields
        amount_span = _group(m, template, "amount")
        if not amount_span:
            return reject(RejectionReason.FIELD_EXTRACTION_FAILED, PipelineState.TEMPLATE_MATCHED)
        amount_minor = parse_amount(amount_span)
        if amount_minor is None:
            return reject(RejectionReason.INVALID_AMOUNT, PipelineState.TEMPLATE_MATCHED)

        txn_type = extract_direction(_group(m, template, "direction"))
        if txn_type is None:
            return reject(RejectionReason.AMBIGUOUS_DIRECTION, PipelineState.TEMPLATE_MATCHED)

        account_tail = extract_account_tail(_group(m, template, "account"))
        if account_tail is None:
            return reject(RejectionReason.FIELD_EXTRACTION_FAILED, PipelineState.TEMPLATE_MATCHED)

        channel = classify_channel(body, template, m)
        merchant = extract_merchant(_group(m, template, "merchant"))
        reference = extract_reference(_group(m, template, "reference"), body)
        balance_minor = extract_balance(body)

        # 4. Validate
        if amount_minor <= 0:
            return reject(RejectionReason.INVALID_AMOUNT, PipelineState.FIELDS_EXTRACTED)
        if not is_valid_account_tail(account_tail):
            return reject(RejectionReason.INVALID_ACCOUNT_TAIL, PipelineState.FIELDS_EXTRACTED)

        # 5. Accept
        transaction = ParsedTransaction(
            type=txn_type,
            amount_minor=amount_minor,
            channel=channel,
            merchant=merchant,
            account_tail=account_tail,
            bank=bank,
            is_transfer=is_transfer(template.kind, channel, merchant, body),
            timestamp=timestamp,
            raw_sender=sender,
            raw_body=body,
            reference=reference,
            balance_minor=balance_minor,
        )
        return ParseOutcome.accept(transaction, template.name)


_engine: Optional[SmsTransactionEngine] = None
_engine_lock = threading.Lock()


def initialize(signature_table: Union[BankSignatureRegistry, Iterable[BankSignature]]) -> SmsTransactionEngine:
    """
    Builds the shared engine once. Calling it again with an equal table is a
    no-op; a different table raises EngineAlreadyInitializedError.
    """
    global _engine
    if isinstance(signature_table, BankSignatureRegistry):
        registry = signature_table
    else:
        registry = BankSignatureRegistry(signature_table)

    with _engine_lock:
        if _engine is not None:
            if _engine.registry == registry:
                return _engine
            raise EngineAlreadyInitializedError(
                f"Engine already initialized with banks {_engine.registry.codes()}"
            )
        _engine = SmsTransactionEngine(registry)
        logger.info("SMS transaction engine initialized with banks: %s", ", ".join(registry.codes()))
        return _engine


def get_engine() -> SmsTransactionEngine:
    if _engine is None:
        raise EngineNotInitializedError("initialize() must be called before parse()")
    return _engine


def is_initialized() -> bool:
    return _engine is not None


def reset() -> None:
    """Drops the shared engine so initialize() can run again (test isolation)."""
    global _engine
    with _engine_lock:
        _engine = None


def parse(sender: str, body: str, timestamp_millis: int) -> Optional[ParsedTransaction]:
    return get_engine().parse(sender, body, timestamp_millis)
