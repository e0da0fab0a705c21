from .errors import (
    ConfigError,
    DigitsError,
    NegativeValueError,
    ReprSizeError,
    SizeOverflowError,
    UnknownUnitError,
)
from .size import Size
from .units import Units

__all__ = [
    'ConfigError',
    'DigitsError',
    'NegativeValueError',
    'ReprSizeError',
    'Size',
    'SizeOverflowError',
    'UnknownUnitError',
    'Units',
]
