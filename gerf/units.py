from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InputError


class Unit(Enum):
    BYTE = 0
    KILOBYTE = 1
    MEGABYTE = 2
    GIGABYTE = 3
    TERABYTE = 4

    @property
    def multiplier(self) -> int:
        return 1024 ** self.value


_SUFFIXES = ("B", "KiB", "MiB", "GiB", "TiB")


def normalize(magnitude: int, unit: Unit) -> int:
    """Return ``magnitude`` expressed in bytes (powers of 1024)."""
    if magnitude < 0:
        raise InputError(f"Size must not be negative: {magnitude}")
    return magnitude * unit.multiplier


@dataclass(frozen=True)
class SizeSpec:
    magnitude: int
    unit: Unit = Unit.BYTE

    def to_bytes(self) -> int:
        return normalize(self.magnitude, self.unit)


def parse_magnitude(text: str) -> int:
    """Parse the positional size argument into a non-negative integer."""
    digits = text.strip() if isinstance(text, str) else ""
    # plain ASCII digits only: no sign, no underscores
    if not (digits.isascii() and digits.isdigit()):
        raise InputError(f"Expected a number as filesize: {text!r}")
    return int(digits)


def unit_from_flags(
    byte: bool = False,
    kilobyte: bool = False,
    megabyte: bool = False,
    gigabyte: bool = False,
    terabyte: bool = False,
) -> Unit:
    flags = [
        (byte, Unit.BYTE),
        (kilobyte, Unit.KILOBYTE),
        (megabyte, Unit.MEGABYTE),
        (gigabyte, Unit.GIGABYTE),
        (terabyte, Unit.TERABYTE),
    ]
    chosen = [unit for is_set, unit in flags if is_set]
    if len(chosen) > 1:
        names = ", ".join(u.name.lower() for u in chosen)
        raise InputError(f"Only one size unit may be given, got: {names}")
    return chosen[0] if chosen else Unit.BYTE


def format_size(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    value = float(n)
    idx = 0
    while value >= 1024 and idx < len(_SUFFIXES) - 1:
        value /= 1024
        idx += 1
    return f"{value:.1f} {_SUFFIXES[idx]}"
