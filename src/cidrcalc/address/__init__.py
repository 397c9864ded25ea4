"""
Address Translation Module

Parses dotted field specifications, packs values into variable-width bit
fields and produces dotted-quad network addresses.
"""

from cidrcalc.address.core import (
    DEFAULT_MASK,
    DEFAULT_WITHIN,
    WITHIN_WIDTHS,
    TranslationError,
    MalformedInputError,
    InvalidFieldError,
    InvalidMaskError,
    FieldCountMismatchError,
    FieldOverflowError,
    FieldBreakdown,
    Translation,
    parse_fields,
    validate_widths,
    pack_fields,
    split_octets,
    compute_octets,
    explain,
    translate,
)

__all__ = [
    "DEFAULT_MASK",
    "DEFAULT_WITHIN",
    "WITHIN_WIDTHS",
    "TranslationError",
    "MalformedInputError",
    "InvalidFieldError",
    "InvalidMaskError",
    "FieldCountMismatchError",
    "FieldOverflowError",
    "FieldBreakdown",
    "Translation",
    "parse_fields",
    "validate_widths",
    "pack_fields",
    "split_octets",
    "compute_octets",
    "explain",
    "translate",
]
