"""
Core address translation functionality.

A mask such as ``12.8.6.6`` describes how a 32-bit address is carved into
fields. A value such as ``0.1.1.1`` supplies one number per field. The
fields are packed most-significant first and the result is OR-ed into a
"within" base address:

    >>> translate("0.1.1.1", mask="12.8.6.6", within="172.16.0.0")
    '172.16.16.65'
"""

import logging
import re
from dataclasses import dataclass, field, asdict
from typing import Any, Sequence

logger = logging.getLogger(__name__)

ADDRESS_BITS = 32
OCTET_COUNT = 4

DEFAULT_MASK = "8:13:4:7"
DEFAULT_WITHIN = "0.0.0.0"

# The within address is always read as a plain dotted quad
WITHIN_WIDTHS: tuple[int, ...] = (8, 8, 8, 8)

_FIELD_RE = re.compile(r"[0-9]+")


class TranslationError(ValueError):
    """Base exception for address translation errors."""
    pass


class MalformedInputError(TranslationError):
    """Input has no separator, so field boundaries cannot be found."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"the input '{text}' has only one or no fields")


class InvalidFieldError(TranslationError):
    """A field is not a non-negative base-10 integer."""

    def __init__(self, field: str, position: int):
        self.field = field
        self.position = position
        super().__init__(
            f"field #{position} ('{field}') is not a non-negative integer"
        )


class InvalidMaskError(TranslationError):
    """Mask widths do not add up to 32 bits."""

    def __init__(self, total: int):
        self.total = total
        super().__init__(
            f"expected the mask to define {ADDRESS_BITS} bits, found {total}"
        )


class FieldCountMismatchError(TranslationError):
    """An input has the wrong number of fields.

    ``source`` names the input at fault: ``"value"`` when it disagrees with
    the mask, ``"within"`` when the within address is not a dotted quad.
    """

    def __init__(self, expected: int, actual: int, source: str = "value"):
        self.expected = expected
        self.actual = actual
        self.source = source
        if source == "value":
            message = (
                f"different number of fields in the mask ({expected}) "
                f"and the value ({actual})"
            )
        else:
            message = f"the {source} address needs {expected} fields, found {actual}"
        super().__init__(message)


class FieldOverflowError(TranslationError):
    """A value has bits set outside its declared field width."""

    def __init__(self, index: int, value: int, width: int):
        self.index = index
        self.value = value
        self.width = width
        super().__init__(
            f"field #{index} ({value}) exceeds the defined field length of {width}"
        )


def parse_fields(text: str) -> list[int]:
    """Parse a delimited string of non-negative integers.

    The first character outside ``0-9`` becomes the separator for the whole
    string, so ``"8:13:4:7"`` and ``"12.8.6.6"`` both work. Any other
    non-digit character later in the string ends up inside a field and is
    rejected.

    Raises:
        MalformedInputError: No separator was found.
        InvalidFieldError: A field is empty, signed or not a number.
    """
    sep = next((c for c in text if not "0" <= c <= "9"), None)
    if sep is None:
        raise MalformedInputError(text)

    fields = []
    for position, part in enumerate(text.split(sep)):
        if not _FIELD_RE.fullmatch(part):
            raise InvalidFieldError(part, position)
        fields.append(int(part))

    logger.debug("Parsed %r with separator %r: %s", text, sep, fields)
    return fields


def field_mask(width: int) -> int:
    """Return a run of ``width`` one-bits."""
    return (1 << width) - 1


def validate_widths(widths: Sequence[int]) -> None:
    """Ensure the field widths describe exactly 32 bits."""
    total = sum(widths)
    if total != ADDRESS_BITS:
        raise InvalidMaskError(total)


def pack_fields(widths: Sequence[int], values: Sequence[int]) -> int:
    """Pack values into a 32-bit integer, first field most significant."""
    if len(widths) != len(values):
        raise FieldCountMismatchError(len(widths), len(values))

    result = 0
    for index, (width, value) in enumerate(zip(widths, values)):
        if value & field_mask(width) != value:
            raise FieldOverflowError(index, value, width)
        result = ((result << width) | value) & 0xFFFFFFFF

    return result


def split_octets(packed: int) -> list[int]:
    """Split a 32-bit integer into 4 octets in network byte order."""
    octets = []
    for _ in range(OCTET_COUNT):
        octets.append(packed & 0xFF)
        packed >>= 8
    octets.reverse()
    return octets


def compute_octets(widths: Sequence[int], values: Sequence[int]) -> list[int]:
    """Pack values into their fields and return the resulting octets."""
    return split_octets(pack_fields(widths, values))


def format_octets(octets: Sequence[int]) -> str:
    return "%d.%d.%d.%d" % tuple(octets)


@dataclass
class FieldBreakdown:
    """One mask field and where it lands in the address."""
    index: int
    width: int
    value: int
    offset: int  # bit position of the field's least significant bit

    @property
    def bits(self) -> str:
        return format(self.value, f"0{self.width}b") if self.width else ""


@dataclass
class Translation:
    """Result of translating a value through a mask into an address."""
    value: str
    mask: str
    within: str
    widths: list[int] = field(default_factory=list)
    values: list[int] = field(default_factory=list)
    netmask_octets: list[int] = field(default_factory=list)
    within_octets: list[int] = field(default_factory=list)
    octets: list[int] = field(default_factory=list)
    address: str = ""

    @property
    def packed(self) -> int:
        return pack_fields(WITHIN_WIDTHS, self.octets)

    def fields(self) -> list[FieldBreakdown]:
        breakdown = []
        remaining = ADDRESS_BITS
        for index, (width, value) in enumerate(zip(self.widths, self.values)):
            remaining -= width
            breakdown.append(FieldBreakdown(index, width, value, remaining))
        return breakdown

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["packed"] = self.packed
        data["fields"] = [
            {**asdict(f), "bits": f.bits} for f in self.fields()
        ]
        return data


def explain(
    value: str,
    mask: str = DEFAULT_MASK,
    within: str = DEFAULT_WITHIN,
    within_widths: Sequence[int] = WITHIN_WIDTHS,
) -> Translation:
    """Translate a value and keep every intermediate step.

    Raises:
        TranslationError: On the first invalid input, in the order mask,
            value, within.
    """
    widths = parse_fields(mask)
    validate_widths(widths)

    values = parse_fields(value)
    if len(widths) != len(values):
        raise FieldCountMismatchError(len(widths), len(values))

    netmask = compute_octets(widths, values)

    within_values = parse_fields(within)
    if len(within_widths) != len(within_values):
        raise FieldCountMismatchError(
            len(within_widths), len(within_values), source="within"
        )

    base = compute_octets(within_widths, within_values)

    octets = [n | w for n, w in zip(netmask, base)]
    address = format_octets(octets)
    logger.debug("Translated %s through mask %s within %s: %s", value, mask, within, address)

    return Translation(
        value=value,
        mask=mask,
        within=within,
        widths=widths,
        values=values,
        netmask_octets=netmask,
        within_octets=base,
        octets=octets,
        address=address,
    )


def translate(
    value: str,
    mask: str = DEFAULT_MASK,
    within: str = DEFAULT_WITHIN,
    within_widths: Sequence[int] = WITHIN_WIDTHS,
) -> str:
    """Translate a value through a field mask into a dotted-quad address."""
    return explain(value, mask, within, within_widths).address
