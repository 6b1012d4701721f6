import re

class CompiledPatterns:
    class Amount:
        CURRENCY_PREFIX = re.compile(r"^\s*(?:Rs\.?|INR|₹)\s*", re.IGNORECASE)
        # Indian (1,00,000) and Western (100,000) grouping; commas only in the whole part.
        NUMERAL = re.compile(r"^(?P<whole>\d(?:,?\d)*)(?:\.(?P<fraction>\d{0,2}))?$")

    class Fragments:
        """Regex source fragments shared by the bank body templates."""
        CURRENCY = r"(?:Rs\.?|INR|₹)"
        AMOUNT = rf"(?P<amount>{CURRENCY}\s*\d[\d,]*(?:\.\d+)*)"
        DATE = r"\d{1,2}[-/](?:\d{1,2}|[A-Za-z]{3})[-/]\d{2,4}"
        TIME = r"\d{1,2}:\d{2}(?::\d{2})?"
        ON_DATE = rf"(?:\s+on\s+{DATE}(?:[\s,]+{TIME})?)?"
        ACCOUNT_WORD = r"\b(?:A/c|Acct|Account|AC)(?:\s+No\.?)?"
        ACCOUNT = r"(?P<account>[Xx*#.]*\d+)"
        COUNTER_ACCOUNT = r"(?P<counter_account>[Xx*#.]*\d+)"
        MERCHANT_END = (
            r"(?=\s*(?:\.\s|\.$|,|;|\s+on\s+\d|\s+UPI\b|\s+Ref\b|\s+Avl\b"
            r"|\s+Bal\b|\s+Info\b|\s+via\b|\s+by\b|$))"
        )
        MERCHANT = rf"(?P<merchant>[^\n]+?){MERCHANT_END}"
        RAIL = r"(?P<channel>UPI|NEFT|IMPS|RTGS|Net\s*Banking)"

    class Reference:
        UPI_REF = re.compile(r"\bUPI\s+Ref(?:\s+No)?\.?[:\s]+([A-Za-z0-9]+)", re.IGNORECASE)
        REF_NO = re.compile(r"\bRef(?:erence)?\s*(?:No|Number)?\.?[:\s]+([A-Za-z0-9]{6,})", re.IGNORECASE)
        RRN = re.compile(r"\bRRN(?:\s+No)?\.?[:\s]+([A-Za-z0-9]+)", re.IGNORECASE)
        UTR = re.compile(r"\bUTR(?:\s+No)?\.?[:\s]+([A-Za-z0-9]+)", re.IGNORECASE)
        UPI_COLON = re.compile(r"\bUPI:\s*([A-Za-z0-9]{6,})", re.IGNORECASE)
        ALL_PATTERNS = [UPI_REF, REF_NO, RRN, UTR, UPI_COLON]

    class Account:
        MASKED_TAIL = re.compile(r"^(?P<mask>[Xx*#.]+)(?P<digits>\d+)$")
        NORMALIZED_TAIL = re.compile(r"^XX\d{4}$")
        ANY_REFERENCE = re.compile(
            r"\b(?:A/c|Acct|Account|AC)(?:\s+No\.?)?[\s:#]*[Xx*#.]*\d{3,}",
            re.IGNORECASE
        )

    class Balance:
        AVL_BAL = re.compile(
            r"\b(?:Avl\.?\s*Bal(?:ance)?|Available\s+Bal(?:ance)?|Bal(?:ance)?)[:\s]*"
            r"((?:Rs\.?|INR|₹)\s*\d[\d,]*(?:\.\d+)*)",
            re.IGNORECASE
        )
        ALL_PATTERNS = [AVL_BAL]

    class Channel:
        UPI = re.compile(r"\bUPI\b|\bVPA\b", re.IGNORECASE)
        NEFT = re.compile(r"\bNEFT\b", re.IGNORECASE)
        IMPS = re.compile(r"\bIMPS\b", re.IGNORECASE)
        RTGS = re.compile(r"\bRTGS\b", re.IGNORECASE)
        NETBANKING = re.compile(r"\bnet\s*-?\s*banking\b", re.IGNORECASE)
        ATM = re.compile(r"\bATM\b", re.IGNORECASE)
        CARD = re.compile(r"\bcard\b|\bPOS\b", re.IGNORECASE)

    class Cleaning:
        TRAILING_PARENTHESES = re.compile(r"\s*\(.*?\)\s*$")
        REF_NUMBER_SUFFIX = re.compile(r"\s+Ref\s+No.*", re.IGNORECASE)
        DATE_SUFFIX = re.compile(r"\s+on\s+\d{1,2}.*")
        TIME_SUFFIX = re.compile(r"\s+at\s+\d{2}:\d{2}.*")
        TRAILING_DASH = re.compile(r"\s*-\s*$")
        TRAILING_PUNCTUATION = re.compile(r"[\s.,;:!-]+$")
        PVT_LTD = re.compile(r"(\s+PVT\.?\s*LTD\.?|\s+PRIVATE\s+LIMITED)$", re.IGNORECASE)
        LTD = re.compile(r"(\s+LTD\.?|\s+LIMITED)$", re.IGNORECASE)
        VPA_HANDLE = re.compile(r"^(?:VPA\s+)?([^@\s]+)@\S*$", re.IGNORECASE)
        WHITESPACE = re.compile(r"\s+")

    class Sender:
        NON_ALPHANUMERIC = re.compile(r"[^A-Z0-9]")
