"""Bitmask helpers for integer-backed flag enumerations."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from pathscrub.exceptions import FlagColumnOutOfRangeError, MissingAnnotationError
from pathscrub.models import MultiFlag

FlagLike = int | Enum

# Every flag value is handled as a 64-bit field; signed inputs wrap to
# their two's complement bit pattern.
BIT_WIDTH = 64
BIT_MASK = (1 << BIT_WIDTH) - 1


def to_bits(value: FlagLike) -> int:
    """
    Convert a flag value to its 64-bit pattern.

    Accepts ints (including IntFlag/IntEnum members) and Enum members
    whose value is an int.

    Raises:
        TypeError: If the value has no integer representation
    """
    if isinstance(value, int):
        return int(value) & BIT_MASK
    if isinstance(value, Enum) and isinstance(value.value, int):
        return int(value.value) & BIT_MASK
    raise TypeError(f"Cannot use {value!r} as a flag value")


def is_flag_set(bit_field: FlagLike, flag: FlagLike) -> bool:
    """
    Return True if every bit in flag is also set in bit_field.

    Other bits in bit_field are ignored. A zero flag is always set.
    """
    flag_bits = to_bits(flag)
    return (to_bits(bit_field) & flag_bits) == flag_bits


def is_any_flag_set(bit_field: FlagLike, *flags: FlagLike) -> bool:
    """Return True if any of the given flags is set; False when none are given."""
    return any(is_flag_set(bit_field, flag) for flag in flags)


def set_flag(bit_field: FlagLike, flag: FlagLike, on: bool) -> int:
    """Return bit_field with flag switched on or off."""
    if on:
        return to_bits(bit_field) | to_bits(flag)
    return to_bits(bit_field) & ~to_bits(flag) & BIT_MASK


@dataclass
class BitField:
    """Mutable holder for callers that update a bit field in place."""

    value: int = 0

    def set_flag(self, flag: FlagLike, on: bool) -> int:
        """Switch flag on or off and return the new value."""
        self.value = set_flag(self.value, flag, on)
        return self.value

    def is_flag_set(self, flag: FlagLike) -> bool:
        return is_flag_set(self.value, flag)


def get_multi_flag(
    value: object, table: Mapping[object, MultiFlag] | None = None
) -> MultiFlag:
    """
    Look up the (flag value, column) annotation for a flag.

    Args:
        value: The flag to look up
        table: Explicit annotation table. When omitted, value must be an
            Enum member whose value is a MultiFlag.

    Returns:
        The MultiFlag annotation

    Raises:
        MissingAnnotationError: If no annotation exists for value
    """
    if table is not None:
        try:
            return table[value]
        except (KeyError, TypeError):
            raise MissingAnnotationError(value) from None
    if isinstance(value, Enum) and isinstance(value.value, MultiFlag):
        return value.value
    raise MissingAnnotationError(value)


def is_multi_flag_set(
    value: object,
    bit_fields: Sequence[FlagLike],
    table: Mapping[object, MultiFlag] | None = None,
) -> bool:
    """
    Return True if an annotated flag is set in its column of bit_fields.

    Raises:
        MissingAnnotationError: If value has no annotation
        FlagColumnOutOfRangeError: If the annotation's column is not in bit_fields
    """
    annotation = get_multi_flag(value, table)
    if not 0 <= annotation.column < len(bit_fields):
        raise FlagColumnOutOfRangeError(annotation.column, len(bit_fields))
    return is_flag_set(bit_fields[annotation.column], annotation.flag_value)
