import argparse
import logging
import os
import sys
from typing import List, Optional

from . import config
from .bank import DEFAULT_SIGNATURES
from .batch import process_csv
from .engine import initialize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sms-parser", description="SMS transaction extraction")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    parse_csv = sub.add_parser("parse-csv", help="Parse an SMS export CSV into transactions")
    parse_csv.add_argument("--input", type=str, required=True, help="Input SMS CSV file path")
    parse_csv.add_argument("--output", type=str, required=True, help="Output transactions CSV path")
    parse_csv.add_argument("--workers", type=int, default=config.BATCH_WORKERS, help="Parser threads")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default=config.API_HOST)
    serve.add_argument("--port", type=int, default=config.API_PORT)
    return parser


def run_parse_csv(args: argparse.Namespace) -> int:
    input_path = os.path.abspath(args.input)
    output_path = os.path.abspath(args.output)

    if not os.path.exists(input_path):
        logger.error("File %s not found.", input_path)
        return 1

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    engine = initialize(DEFAULT_SIGNATURES)
    try:
        process_csv(engine, input_path, output_path, max_workers=args.workers)
    except ValueError as e:
        logger.error("Could not process %s: %s", input_path, e)
        return 1
    return 0


def run_serve(args: argparse.Namespace) -> int:
    from .api import serve

    initialize(DEFAULT_SIGNATURES)
    serve(host=args.host, port=args.port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "parse-csv":
        return run_parse_csv(args)
    return run_serve(args)


if __name__ == "__main__":
    sys.exit(main())
