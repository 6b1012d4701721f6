class Constants:
    """
    Constants used for bank message parsing.
    """

    class Parsing:
        AMOUNT_SCALE = 2
        MINOR_UNITS_PER_MAJOR = 100
        MIN_MERCHANT_NAME_LENGTH = 2
        ACCOUNT_TAIL_PREFIX = "XX"
        LOG_PREVIEW_LENGTH = 100
        # Largest amount a signed 64-bit minor-unit column can hold.
        MAX_AMOUNT_MINOR = 2 ** 63 - 1

    class Direction:
        DEBIT_KEYWORDS = frozenset({
            "debited", "spent", "withdrawn", "debited from", "sent",
            "transferred from",
        })
        CREDIT_KEYWORDS = frozenset({
            "credited", "received", "deposited", "transferred to",
        })

    class Merchant:
        COMMON_WORDS = frozenset({
            "USING", "VIA", "THROUGH", "BY", "WITH",
            "FOR", "TO", "FROM", "AT", "ON", "THE",
        })

    class Transfer:
        SELF_TRANSFER_PHRASES = (
            "self transfer", "own account", "between your accounts",
            "internal transfer", "intra bank", "same bank", "account to account",
            "a/c to a/c", "inter account",
        )
