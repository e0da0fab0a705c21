import polars as pl
import rich
from loguru import logger
from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.table import Table
from rich.theme import Theme


class _Highlighter(ReprHighlighter):
    highlights = [*ReprHighlighter.highlights, r'(?P<vb>\|)']  # noqa: RUF012


cnsl = rich.get_console()
cnsl.push_theme(Theme({'repr.vb': 'bold blue'}))


def set_logger(level: int = 20, *, file=True):
    logger.remove()

    _handler = RichHandler(
        console=cnsl,
        highlighter=_Highlighter(),
        markup=True,
        log_time_format='[%X]',
    )
    logger.add(_handler, level=level, format='{message}')

    if file:
        logger.add(
            'reprsize.log',
            level=min(20, level),
            rotation='1 month',
            retention='1 year',
            encoding='UTF-8-SIG',
        )


def df_table(df: pl.DataFrame, table: Table | None = None) -> Table:
    if table is None:
        table = Table()

    for column, dtype in df.schema.items():
        justify = 'right' if dtype.is_numeric() else 'left'
        table.add_column(column, justify=justify)

    for row in df.iter_rows():
        table.add_row(*('' if x is None else str(x) for x in row))

    return table


def print_df(df: pl.DataFrame, table: Table | None = None):
    cnsl.print(df_table(df=df, table=table))
