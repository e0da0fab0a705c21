# ruff: noqa: DOC501

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Group, Parameter
from loguru import logger

from reprsize import ReprSizeError, Size, Units
from reprsize.config import Config
from reprsize.frame import sizes_frame, units_frame
from reprsize.utils import cnsl, print_df, set_logger

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)

Count = Annotated[int, Parameter(allow_leading_hyphen=True)]


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
):
    set_logger(level=10 if debug else 20)

    try:
        app(tokens)
    except ReprSizeError as e:
        logger.error('{}: {}', type(e).__name__, e)
        sys.exit(1)


def _config(path: Path | None) -> Config:
    return Config.find() if path is None else Config.from_toml(path)


@app.command
def show(
    *counts: Count,
    binary: bool | None = None,
    digits: int | None = None,
    unit: str | None = None,
    config: Path | None = None,
):
    """
    바이트 수를 사람이 읽기 쉬운 크기로 출력.

    Parameters
    ----------
    counts : int
        바이트 수.
    binary : bool | None, optional
        KiB, MiB, ... 단위 사용. 미입력 시 설정 파일 값.
    digits : int | None, optional
        소수점 자릿수. 미입력 시 설정 파일 값.
    unit : str | None, optional
        고정 단위 (e.g. `KiB`, `megabytes`).
    config : Path | None, optional
        설정 파일 경로. 미입력 시 `reprsize.toml`, `pyproject.toml` 탐색.
    """
    conf = _config(config)
    binary = conf.binary if binary is None else binary
    digits = conf.digits if digits is None else digits
    fixed = Units.parse(unit) if unit else conf.units

    for count in counts:
        size = Size.from_signed(count)

        if fixed is None:
            text = size.to_string(binary=binary, digits=digits)
        else:
            text = size.render(fixed, digits=digits)

        logger.debug('{} | {!r}', text, size)
        cnsl.print(text, highlight=False)


@app.command
def table(*counts: Count, digits: int = 1):
    """바이트 수별 decimal, binary 단위 표 출력."""
    sizes = [Size.from_signed(x).count for x in counts]
    if not sizes:
        logger.warning('No sizes')
        return

    print_df(sizes_frame(sizes, digits=digits))


@app.command
def units():
    """단위 목록."""
    print_df(units_frame())


@app.command
def convert(amount: Count, unit: str, *, to: str | None = None, digits: int = 1):
    """
    `amount` `unit`을 바이트 수 (또는 `to` 단위)로 변환.

    Parameters
    ----------
    amount : int
        크기.
    unit : str
        `amount`의 단위.
    to : str | None, optional
        출력 단위. 미입력 시 바이트 수 출력.
    digits : int, optional
        소수점 자릿수.
    """
    size = Size.from_units(amount, Units.parse(unit))
    text = str(int(size)) if to is None else size.render(Units.parse(to), digits)
    cnsl.print(text, highlight=False)


if __name__ == '__main__':
    app.meta()
