import dataclasses as dc
import tomllib
from pathlib import Path

from loguru import logger

from reprsize.errors import ConfigError
from reprsize.units import Units


@dc.dataclass
class Config:
    binary: bool = False
    digits: int = 1
    unit: str | None = None

    FILES = ('reprsize.toml', 'pyproject.toml')

    def __post_init__(self):
        if not isinstance(self.binary, bool):
            msg = f'binary must be bool, not {self.binary!r}'
            raise ConfigError(msg)

        if isinstance(self.digits, bool) or not isinstance(self.digits, int):
            msg = f'digits must be int, not {self.digits!r}'
            raise ConfigError(msg)

        if self.digits < 0:
            msg = f'digits must be >= 0, not {self.digits}'
            raise ConfigError(msg)

        if self.unit is not None:
            if not isinstance(self.unit, str):
                msg = f'unit must be str, not {self.unit!r}'
                raise ConfigError(msg)

            Units.parse(self.unit)

    @property
    def units(self) -> Units | None:
        return None if self.unit is None else Units.parse(self.unit)

    @staticmethod
    def _table(config: dict) -> dict:
        if {'tool', 'project', 'build-system'} & set(config):
            return config.get('tool', {}).get('reprsize', {})  # pyproject.toml

        return config  # reprsize.toml

    @classmethod
    def from_toml(cls, source: str | Path, /):
        try:
            s = source if isinstance(source, str) else source.read_text('UTF-8')
            table = cls._table(tomllib.loads(s))
        except OSError as e:
            msg = f'Cannot read config "{source}": {e}'
            raise ConfigError(msg) from e
        except tomllib.TOMLDecodeError as e:
            msg = f'Invalid TOML: {e}'
            raise ConfigError(msg) from e

        fields = {x.name for x in dc.fields(cls)}
        if unknown := set(table) - fields:
            msg = f'Unknown config keys: {sorted(unknown)}'
            raise ConfigError(msg)

        return cls(**table)

    @classmethod
    def find(cls, root: Path | None = None):
        root = root or Path.cwd()

        for name in cls.FILES:
            if (path := root / name).is_file():
                logger.debug('Config="{}"', path)
                return cls.from_toml(path)

        return cls()
