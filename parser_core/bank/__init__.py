from .bank_signature import (
    BankSignature,
    BodyTemplate,
    MatchMode,
    SenderMatcher,
    TemplateKind,
    normalize_sender,
)
from .bank_signature_registry import BankSignatureRegistry
from .bank_signature_table import DEFAULT_SIGNATURES, default_registry
from .base_indian_templates import build_indian_templates

__all__ = [
    "BankSignature",
    "BankSignatureRegistry",
    "BodyTemplate",
    "DEFAULT_SIGNATURES",
    "MatchMode",
    "SenderMatcher",
    "TemplateKind",
    "build_indian_templates",
    "default_registry",
    "normalize_sender",
]
