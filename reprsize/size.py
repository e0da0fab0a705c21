"""Byte count with decimal (kB, MB, ...) and binary (KiB, MiB, ...) representations."""

from __future__ import annotations

import dataclasses as dc
from typing import ClassVar

from reprsize.errors import DigitsError, NegativeValueError, SizeOverflowError
from reprsize.units import Units


@dc.dataclass(frozen=True, order=True)
class Size:
    """
    Represents an amount of bytes.

    Create with `Size(count)`, `Size.from_units(amount, unit)` or
    `Size.from_signed(value)`.

    Examples
    --------
    >>> size = Size(54222)
    >>> str(size)
    '54.2 kB'
    >>> size.to_binary_string()
    '52.9 KiB'
    >>> size.render(Units.Bytes)
    '54222.0 B'
    """

    count: int

    MAX_COUNT: ClassVar[int] = 2**64 - 1

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            msg = f'Size count must be int, not {type(self.count).__name__}'
            raise TypeError(msg)

        if self.count < 0:
            raise NegativeValueError(self.count)

        if self.count > self.MAX_COUNT:
            raise SizeOverflowError(self.count, self.MAX_COUNT)

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __int__(self) -> int:
        return self.count

    @classmethod
    def from_count(cls, count: int) -> Size:
        return cls(count)

    @classmethod
    def from_units(cls, amount: int, unit: Units) -> Size:
        """
        Size of `amount` times the bytes in `unit`.

        Raises
        ------
        NegativeValueError
            If `amount` is negative.
        SizeOverflowError
            If the result does not fit in an unsigned 64-bit integer.
        """
        return cls(amount * unit.bytes)

    @classmethod
    def from_signed(cls, value: int) -> Size:
        """
        Raises
        ------
        NegativeValueError
            If `value < 0`.
        """
        if value < 0:
            raise NegativeValueError(value)

        return cls(value)

    @staticmethod
    def _select(count: int, *, binary: bool) -> Units:
        unit = Units.Bytes
        for u in Units.family(binary=binary)[1:]:
            if count < u.bytes:
                break

            unit = u

        return unit

    def decimal_units(self) -> Units:
        """Largest decimal unit that is not larger than this size."""
        return self._select(self.count, binary=False)

    def binary_units(self) -> Units:
        """Largest binary unit that is not larger than this size."""
        return self._select(self.count, binary=True)

    def units(self, *, binary=False) -> Units:
        return self.binary_units() if binary else self.decimal_units()

    def amount(self, unit: Units) -> float:
        return self.count / unit.bytes

    def human_readable(self, *, binary=False) -> tuple[float, Units]:
        unit = self.units(binary=binary)
        return self.amount(unit), unit

    def render(self, unit: Units, digits: int = 1) -> str:
        """
        Represent the size in `unit`, e.g. `Size(22000).render(Units.Kibibytes)`
        is `'21.4 KiB'`.

        Fractional digits beyond `digits` are truncated, not rounded, so
        `Size(1999)` is `'1.9 kB'` where a rounding `'{:.1f}'` gives `'2.0 kB'`.

        Raises
        ------
        DigitsError
            If `digits < 0`.
        """
        if digits < 0:
            raise DigitsError(digits)

        scaled = self.count * 10**digits // unit.bytes
        integer, fraction = divmod(scaled, 10**digits)

        if not digits:
            return f'{integer} {unit}'

        return f'{integer}.{fraction:0{digits}d} {unit}'

    def to_decimal_string(self, digits: int = 1) -> str:
        return self.render(self.decimal_units(), digits=digits)

    def to_binary_string(self, digits: int = 1) -> str:
        return self.render(self.binary_units(), digits=digits)

    def to_string(self, *, binary=False, digits: int = 1) -> str:
        return self.render(self.units(binary=binary), digits=digits)
