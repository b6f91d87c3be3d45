class TradeSizeError(Exception):
    """Base error for the calculator. Each subclass maps to a process exit code."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ArgumentCountError(TradeSizeError):
    exit_code = 1

    def __init__(self, usage: str):
        super().__init__(usage)
        self.usage = usage


class ArgumentParseError(TradeSizeError):
    exit_code = 2

    def __init__(self, argument: str, raw_value: str):
        super().__init__(f"Error parsing '{argument}': {raw_value!r} is not a finite decimal number")
        self.argument = argument
        self.raw_value = raw_value


class ZeroRiskError(TradeSizeError):
    """Price equals stop-loss, so there is no per-unit risk to divide by."""

    exit_code = 3

    def __init__(self, price, stop_loss):
        super().__init__(
            f"Per-unit risk is zero (price {price} equals stop-loss {stop_loss}); "
            "share count is undefined"
        )
        self.price = price
        self.stop_loss = stop_loss
