import enum

from reprsize.errors import UnknownUnitError


class Units(enum.Enum):
    """Units available for representing a `Size`."""

    # name = (symbol, base, tier)
    Bytes = ('B', 1, 0)

    Kilobytes = ('kB', 1000, 1)
    Kibibytes = ('KiB', 1024, 1)

    Megabytes = ('MB', 1000, 2)
    Mebibytes = ('MiB', 1024, 2)

    Gigabytes = ('GB', 1000, 3)
    Gibibytes = ('GiB', 1024, 3)

    Terabytes = ('TB', 1000, 4)
    Tebibytes = ('TiB', 1024, 4)

    Petabytes = ('PB', 1000, 5)
    Pebibytes = ('PiB', 1024, 5)

    def __init__(self, symbol: str, base: int, tier: int) -> None:
        self.symbol = symbol
        self.base = base
        self.tier = tier

    def __str__(self) -> str:
        return self.symbol

    @property
    def bytes(self) -> int:
        """Number of bytes in one unit, e.g. `Units.Kibibytes.bytes == 1024`."""
        return self.base**self.tier

    @property
    def binary(self) -> bool:
        return self.base == 1024  # noqa: PLR2004

    @classmethod
    def family(cls, *, binary=False) -> tuple['Units', ...]:
        """`Bytes` followed by the decimal (or binary) units in tier order."""
        base = 1024 if binary else 1000
        return (cls.Bytes, *(x for x in cls if x.base == base))

    @classmethod
    def parse(cls, value: str) -> 'Units':
        """Find a unit by its name (case-insensitive) or its exact symbol."""
        v = value.strip()

        for unit in cls:
            if v == unit.symbol or v.lower() == unit.name.lower():
                return unit

        raise UnknownUnitError(value)
