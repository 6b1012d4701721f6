import pandas as pd

from parser_core.cli import build_parser, main

TS = 1702636215000


def test_parse_csv_command(tmp_path):
    input_path = tmp_path / "sms.csv"
    output_path = tmp_path / "out" / "transactions.csv"
    pd.DataFrame([
        {"address": "HDFCBANK", "body": "Rs.500.00 debited from A/c XX1234 on 15-12-2023 at ZOMATO.", "date": TS},
        {"address": "SPAM", "body": "hello", "date": TS},
    ]).to_csv(input_path, index=False)

    code = main(["parse-csv", "--input", str(input_path), "--output", str(output_path), "--workers", "2"])
    assert code == 0

    written = pd.read_csv(output_path)
    assert written["merchant"].tolist() == ["ZOMATO"]


def test_parse_csv_missing_input(tmp_path):
    code = main(["parse-csv", "--input", str(tmp_path / "missing.csv"), "--output", str(tmp_path / "o.csv")])
    assert code == 1


def test_serve_arguments():
    args = build_parser().parse_args(["serve", "--host", "127.0.0.1", "--port", "9000"])
    assert args.command == "serve"
    assert args.host == "127.0.0.1"
    assert args.port == 9000
