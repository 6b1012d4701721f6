"""
Bulk parsing over message lists, pandas frames and SMS inbox CSV exports.

An export carries ``address``, ``body`` and ``date`` (epoch millis) columns,
plus an optional ``_id`` that is carried through to the output.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from .engine import SmsTransactionEngine
from .parsed_transaction import ParsedTransaction

logger = logging.getLogger(__name__)

Message = Tuple[str, str, int]

REQUIRED_COLUMNS = {"address", "body", "date"}
DEDUP_COLUMNS = ["raw_sender", "raw_body", "timestamp"]
TRANSACTION_COLUMNS = [
    "_id", "type", "amount_minor", "amount", "channel", "merchant", "account_tail", "bank",
    "is_transfer", "reference", "balance_minor", "currency", "timestamp", "raw_sender", "raw_body",
]


def parse_messages(engine: SmsTransactionEngine, messages: Iterable[Message],
                   max_workers: int = 1) -> List[Optional[ParsedTransaction]]:
    """Parses (sender, body, timestamp) triples; results line up with the input."""
    messages = list(messages)
    if max_workers <= 1 or len(messages) <= 1:
        return [engine.parse(sender, body, ts) for sender, body, ts in messages]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda m: engine.parse(*m), messages))


def _timestamps(series: pd.Series) -> pd.Series:
    return pd.to_numeric(series, errors="coerce").fillna(0).astype("int64")


def parse_frame(engine: SmsTransactionEngine, df: pd.DataFrame, max_workers: int = 1) -> pd.DataFrame:
    df = df.copy()

    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    if df.empty:
        return pd.DataFrame(columns=TRANSACTION_COLUMNS)

    ids = df["_id"].tolist() if "_id" in df.columns else [None] * len(df)
    messages = list(zip(
        df["address"].where(df["address"].notna(), None).tolist(),
        df["body"].where(df["body"].notna(), None).tolist(),
        _timestamps(df["date"]).tolist(),
    ))

    results = parse_messages(engine, messages, max_workers=max_workers)

    rows = []
    for row_id, txn in zip(ids, results):
        if txn is None:
            continue
        record = txn.to_dict()
        record["_id"] = row_id
        rows.append(record)

    parsed = pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)
    before = len(parsed)
    parsed = parsed.drop_duplicates(subset=DEDUP_COLUMNS, keep="first").reset_index(drop=True)

    logger.info("Parsed %d transactions from %d messages (%d duplicates dropped)",
                len(parsed), len(df), before - len(parsed))
    return parsed


def process_csv(engine: SmsTransactionEngine, input_path: str, output_path: str,
                max_workers: int = 1) -> pd.DataFrame:
    """Reads an SMS export, parses it and writes the transactions to ``output_path``."""
    logger.info("Reading messages from %s", input_path)
    df = pd.read_csv(input_path)
    parsed = parse_frame(engine, df, max_workers=max_workers)
    parsed.to_csv(output_path, index=False)
    logger.info("Wrote %d transactions to %s", len(parsed), output_path)
    return parsed
