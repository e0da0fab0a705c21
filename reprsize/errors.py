class ReprSizeError(Exception):
    pass


class NegativeValueError(ReprSizeError, ValueError):
    def __init__(self, value, message='Size cannot be negative: {}') -> None:
        self.value = value
        self.message = message.format(value)
        super().__init__(self.message)


class SizeOverflowError(ReprSizeError, OverflowError):
    def __init__(self, value, limit: int) -> None:
        self.value = value
        self.limit = limit
        super().__init__(f'Size {value} exceeds {limit}')


class UnknownUnitError(ReprSizeError, ValueError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return f'Unknown unit: {self.value!r}'


class DigitsError(ReprSizeError, ValueError):
    def __init__(self, digits) -> None:
        self.digits = digits
        super().__init__(f'digits must be >= 0, not {digits}')


class ConfigError(ReprSizeError, ValueError):
    pass
