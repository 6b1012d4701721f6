from enum import Enum

class TransactionType(Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"
