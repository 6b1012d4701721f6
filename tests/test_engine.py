import threading

import pytest

from parser_core import engine as engine_module
from parser_core.bank import DEFAULT_SIGNATURES, default_registry
from parser_core.bank.hdfc_bank_signature import HDFC
from parser_core.channel import Channel
from parser_core.engine import EngineAlreadyInitializedError, EngineNotInitializedError, ParserCoreError
from parser_core.parse_outcome import PipelineState, RejectionReason
from parser_core.transaction_type import TransactionType

TS = 1702636215000

HDFC_DEBIT = (
    "Rs.500.00 debited from A/c XX1234 on 15-12-2023 14:30:15 at ZOMATO. "
    "UPI Ref: 123456789. Avl Bal: Rs.25,000.00"
)
SBI_NEFT_CREDIT = (
    "Rs.10,000.00 credited to A/c XX5678 on 15-12-2023 10:15:30 by NEFT "
    "from A/C 1234567890. Avl Bal: Rs.50,000.00"
)
ICICI_CARD_SPEND = (
    "Rs.1,250.00 spent on ICICI Bank Credit Card XX4321 at AMAZON on "
    "15-12-2023 16:45:20. Avl Limit: Rs.48,750.00"
)
HDFC_TRANSFER = (
    "Rs.5,000.00 transferred from A/c XX1234 to A/c XX5678 on 15-12-2023 "
    "12:00:00. UPI Ref: 987654321"
)


def test_hdfc_upi_debit(engine):
    txn = engine.parse("HDFCBANK", HDFC_DEBIT, TS)
    assert txn.type == TransactionType.DEBIT
    assert txn.amount_minor == 50000
    assert txn.channel == Channel.UPI
    assert txn.merchant == "ZOMATO"
    assert txn.account_tail == "XX1234"
    assert txn.bank == "HDFC"
    assert not txn.is_transfer
    assert txn.reference == "123456789"
    assert txn.balance_minor == 2500000
    assert txn.timestamp == TS
    assert txn.raw_sender == "HDFCBANK"
    assert txn.raw_body == HDFC_DEBIT


def test_sbi_neft_credit(engine):
    txn = engine.parse("SBIINB", SBI_NEFT_CREDIT, TS)
    assert txn.type == TransactionType.CREDIT
    assert txn.amount_minor == 1000000
    assert txn.channel == Channel.NEFT
    assert txn.merchant is None
    assert txn.account_tail == "XX5678"
    assert txn.bank == "SBI"
    assert txn.is_transfer
    assert txn.balance_minor == 5000000


def test_icici_card_spend(engine):
    txn = engine.parse("ICICIB", ICICI_CARD_SPEND, TS)
    assert txn.type == TransactionType.DEBIT
    assert txn.amount_minor == 125000
    assert txn.channel == Channel.CARD
    assert txn.merchant == "AMAZON"
    assert txn.account_tail == "XX4321"
    assert txn.bank == "ICICI"
    assert not txn.is_transfer
    assert txn.balance_minor is None


def test_account_to_account_transfer(engine):
    txn = engine.parse("HDFCBANK", HDFC_TRANSFER, TS)
    assert txn.type == TransactionType.DEBIT
    assert txn.amount_minor == 500000
    assert txn.channel == Channel.UPI
    assert txn.account_tail == "XX1234"
    assert txn.bank == "HDFC"
    assert txn.is_transfer
    assert txn.merchant is None
    assert txn.reference == "987654321"


def test_hdfc_sent_dialect(engine):
    body = "Sent Rs.500.00 From HDFC Bank A/C *1234 To ZOMATO On 15/12/23 Ref 123456789012"
    txn = engine.parse("VM-HDFCBK", body, TS)
    assert txn.type == TransactionType.DEBIT
    assert txn.amount_minor == 50000
    assert txn.merchant == "ZOMATO"
    assert txn.account_tail == "XX1234"
    assert txn.reference == "123456789012"
    assert txn.channel == Channel.UPI


def test_sbi_upi_debit_without_currency_symbol(engine):
    body = "Dear UPI user A/C X1234 debited by 500.0 on date 15Dec23 trf to ZOMATO Refno 123456789012."
    txn = engine.parse("AD-SBIUPI", body, TS)
    assert txn.type == TransactionType.DEBIT
    assert txn.amount_minor == 50000
    assert txn.channel == Channel.UPI
    assert txn.merchant == "ZOMATO"
    assert txn.account_tail == "XX1234"
    assert txn.reference == "123456789012"


def test_axis_multiline_upi_debit(engine):
    body = "INR 500.00 debited\nA/c no. XX1234\n15-12-23, 14:30:15\nUPI/P2M/123456789012/ZOMATO\nNot you? SMS BLOCK"
    outcome = engine.evaluate("BZ-AXISBK", body, TS)
    assert outcome.accepted
    assert outcome.template == "axis_upi_debit"
    txn = outcome.transaction
    assert txn.amount_minor == 50000
    assert txn.channel == Channel.UPI
    assert txn.merchant == "ZOMATO"
    assert txn.reference == "123456789012"


def test_kotak_vpa_merchant(engine):
    body = "Sent Rs.500.00 from Kotak Bank AC X1234 to zomato@hdfcbank on 15-12-23.UPI Ref 123456789012."
    txn = engine.parse("VK-KOTAKB", body, TS)
    assert txn.bank == "KOTAK"
    assert txn.merchant == "zomato"
    assert txn.channel == Channel.UPI
    assert txn.reference == "123456789012"
    assert not txn.is_transfer


def test_generic_templates_serve_banks_without_a_dialect(engine):
    body = "Rs.2,000.00 withdrawn from A/c XX9876 on 15-12-2023 at ATM MG ROAD"
    txn = engine.parse("PNBSMS", body, TS)
    assert txn.bank == "PNB"
    assert txn.type == TransactionType.DEBIT
    assert txn.channel == Channel.ATM


def test_unknown_sender_is_rejected(engine):
    body = "Congratulations! You have won Rs.10,00,000. Claim your prize now."
    assert engine.parse("SPAM", body, TS) is None
    outcome = engine.evaluate("SPAM", body, TS)
    assert outcome.rejection is RejectionReason.UNKNOWN_BANK
    assert outcome.state is PipelineState.REJECTED
    assert outcome.reached is None


@pytest.mark.parametrize("body,template", [
    ("Your OTP for txn of Rs.500.00 at AMAZON is 123456. Do not share.", "otp"),
    ("Rs.500.00 will be debited from A/c XX1234 on 20-12-2023 towards NETFLIX", "upcoming_debit"),
    ("JOHN has requested Rs.500.00 from you on UPI. Ignore if already paid.", "payment_request"),
    ("Rs.5,000.00 is due on your HDFC Bank Card XX4321 by 20-12-2023", "due_reminder"),
    ("Congratulations! You are pre-approved for a loan of Rs.5,00,000", "promotion"),
    ("Rs.50,000.00 credited to A/c XX1234 on 15-12-2023 towards your personal loan disbursal.", "loan_or_limit"),
    ("EMI of Rs.2,500.00 for your loan A/c XX9012 has been debited on 05-01-2024.", "loan_or_limit"),
    ("Your HDFC Bank Credit Card limit has been increased to Rs.2,00,000.", "loan_or_limit"),
])
def test_informational_messages_are_rejected(engine, body, template):
    outcome = engine.evaluate("HDFCBANK", body, TS)
    assert outcome.rejection is RejectionReason.INFORMATIONAL
    assert outcome.template == template
    assert outcome.reached is PipelineState.TEMPLATE_MATCHED
    assert outcome.bank == "HDFC"


def test_no_template_match(engine):
    outcome = engine.evaluate("HDFCBANK", "Your cheque book has been dispatched.", TS)
    assert outcome.rejection is RejectionReason.NO_TEMPLATE_MATCH
    assert outcome.reached is PipelineState.SENDER_RESOLVED


def test_zero_amount_fails_validation(engine):
    outcome = engine.evaluate("HDFCBANK", "Rs.0.00 debited from A/c XX1234 on 15-12-2023 at ZOMATO.", TS)
    assert outcome.transaction is None
    assert outcome.rejection is RejectionReason.INVALID_AMOUNT
    assert outcome.reached is PipelineState.FIELDS_EXTRACTED


def test_malformed_amount(engine):
    outcome = engine.evaluate("HDFCBANK", "Rs.1.2.3 debited from A/c XX1234 on 15-12-2023", TS)
    assert outcome.rejection is RejectionReason.INVALID_AMOUNT
    assert outcome.reached is PipelineState.TEMPLATE_MATCHED


def test_unmasked_account_is_not_an_account_tail(engine):
    outcome = engine.evaluate("HDFCBANK", "Rs.500.00 debited from A/c 1234567890 on 15-12-2023", TS)
    assert outcome.rejection is RejectionReason.FIELD_EXTRACTION_FAILED


def test_short_account_tail(engine):
    outcome = engine.evaluate("HDFCBANK", "Rs.500.00 debited from A/c XX123 on 15-12-2023", TS)
    assert outcome.rejection is RejectionReason.INVALID_ACCOUNT_TAIL


def test_amount_beyond_int64_is_rejected(engine):
    body = "Rs.99999999999999999999.00 debited from A/c XX1234 on 15-12-2023 at ZOMATO."
    outcome = engine.evaluate("HDFCBANK", body, TS)
    assert outcome.rejection is RejectionReason.INVALID_AMOUNT
    assert outcome.transaction is None


@pytest.mark.parametrize("body,template", [
    ("Rs.5,000.00 debited from A/c XX1234 to A/c XX5678 on 15-12-2023 via IMPS. Ref 123456789", "debit"),
    ("Your A/c XX1234 has been debited by Rs.5,000.00 on 15-12-2023 to A/c XX5678 via NEFT", "debit_account_first"),
])
def test_debit_to_own_account_is_a_transfer(engine, body, template):
    outcome = engine.evaluate("HDFCBANK", body, TS)
    assert outcome.template == template
    txn = outcome.transaction
    assert txn.merchant is None
    assert txn.account_tail == "XX1234"
    assert txn.channel in (Channel.IMPS, Channel.NEFT)
    assert txn.is_transfer


@pytest.mark.parametrize("sender,body", [
    (None, HDFC_DEBIT),
    ("HDFCBANK", None),
    ("", HDFC_DEBIT),
    ("HDFCBANK", ""),
])
def test_malformed_input_never_raises(engine, sender, body):
    assert engine.parse(sender, body, TS) is None


def test_parse_is_idempotent(engine):
    first = engine.parse("HDFCBANK", HDFC_DEBIT, TS)
    second = engine.parse("HDFCBANK", HDFC_DEBIT, TS)
    assert first == second
    assert first is not second


def test_parse_from_many_threads(engine):
    results = []

    def worker():
        results.append(engine.parse("HDFCBANK", HDFC_DEBIT, TS))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert all(r == results[0] for r in results)


def test_transaction_amount_views(engine):
    txn = engine.parse("HDFCBANK", HDFC_DEBIT, TS)
    assert str(txn.amount) == "500.00"
    assert str(txn.balance) == "25000.00"
    data = txn.to_dict()
    assert data["amount"] == "500.00"
    assert data["type"] == "DEBIT"
    assert data["channel"] == "UPI"


def test_parse_before_initialize_raises():
    with pytest.raises(EngineNotInitializedError):
        engine_module.parse("HDFCBANK", HDFC_DEBIT, TS)


def test_initialize_then_parse():
    engine_module.initialize(DEFAULT_SIGNATURES)
    txn = engine_module.parse("HDFCBANK", HDFC_DEBIT, TS)
    assert txn.amount_minor == 50000


def test_initialize_is_idempotent_for_equal_tables():
    first = engine_module.initialize(DEFAULT_SIGNATURES)
    second = engine_module.initialize(default_registry())
    assert first is second


def test_initialize_with_different_table_raises():
    engine_module.initialize(DEFAULT_SIGNATURES)
    with pytest.raises(EngineAlreadyInitializedError):
        engine_module.initialize((HDFC,))


def test_engine_errors_share_a_base():
    assert issubclass(EngineNotInitializedError, ParserCoreError)
    assert issubclass(EngineAlreadyInitializedError, ParserCoreError)
