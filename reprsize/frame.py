from collections.abc import Iterable

import polars as pl

from reprsize.size import Size
from reprsize.units import Units


def _render(*, binary: bool, digits: int):
    def render(count: int) -> str:
        return Size(count).to_string(binary=binary, digits=digits)

    return render


def readable(
    column: str = 'size',
    *,
    binary=False,
    digits: int = 1,
    alias: str | None = None,
) -> pl.Expr:
    """Integer byte column rendered as human readable strings."""
    return (
        pl.col(column)
        .map_elements(_render(binary=binary, digits=digits), return_dtype=pl.Utf8)
        .alias(alias or ('binary' if binary else 'decimal'))
    )


def units_frame() -> pl.DataFrame:
    return pl.DataFrame(
        {
            'name': [x.name for x in Units],
            'symbol': [x.symbol for x in Units],
            'base': [x.base for x in Units],
            'tier': [x.tier for x in Units],
            'bytes': [x.bytes for x in Units],
        },
        schema={
            'name': pl.Utf8,
            'symbol': pl.Utf8,
            'base': pl.Int64,
            'tier': pl.Int64,
            'bytes': pl.UInt64,
        },
    )


def sizes_frame(counts: Iterable[int], *, digits: int = 1) -> pl.DataFrame:
    sizes = [Size(x).count for x in counts]
    return (
        pl.DataFrame({'size': sizes}, schema={'size': pl.UInt64})
        .with_columns(
            readable(digits=digits),
            readable(binary=True, digits=digits),
        )
        .sort('size', descending=True)
    )
