from typing import Tuple

from .axis_bank_signature import AXIS
from .bank_signature import BankSignature
from .bank_signature_registry import BankSignatureRegistry
from .hdfc_bank_signature import HDFC
from .icici_bank_signature import ICICI
from .kotak_bank_signature import KOTAK
from .pnb_bank_signature import PNB
from .sbi_bank_signature import SBI
from .yes_bank_signature import YES

# Registration order is lookup order.
DEFAULT_SIGNATURES: Tuple[BankSignature, ...] = (
    HDFC,
    SBI,
    ICICI,
    AXIS,
    KOTAK,
    YES,
    PNB,
)


def default_registry() -> BankSignatureRegistry:
    """Builds a registry over the bundled signature table."""
    return BankSignatureRegistry(DEFAULT_SIGNATURES)
