import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence

from rich.console import Console

from trade_size.cli.report import SizingReport
from trade_size.engine.position_sizer import (
    MAX_RISK_PERCENT,
    MIN_RISK_PERCENT,
    RISK_INCREMENT,
    PositionSizer,
    risk_percent_steps,
)
from trade_size.exception.exception import (
    ArgumentCountError,
    ArgumentParseError,
    TradeSizeError,
)
from trade_size.logging.logger import logger

PROGRAM_NAME = "ts"
ARGUMENT_NAMES = ("account_equity", "price", "stop_loss")
USAGE = f"Usage: {PROGRAM_NAME} ACCOUNT_EQUITY PRICE STOP_LOSS"


def parse_decimal(name: str, raw: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as error:
        raise ArgumentParseError(name, raw) from error
    if not value.is_finite():
        raise ArgumentParseError(name, raw)
    return value


def parse_arguments(argv: Sequence[str]) -> List[Decimal]:
    if len(argv) != len(ARGUMENT_NAMES):
        raise ArgumentCountError(USAGE)
    return [parse_decimal(name, raw) for name, raw in zip(ARGUMENT_NAMES, argv)]


class TradeSizeCLI:
    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def print_error(self, message: str):
        self.error_console.print(message, markup=False, highlight=False, soft_wrap=True)

    def run(self, argv: Sequence[str]) -> int:
        try:
            account_equity, price, stop_loss = parse_arguments(argv)
            sizer = PositionSizer(account_equity, price, stop_loss)
            logger.info(
                f"Sizing trade equity={account_equity} price={price} stop_loss={stop_loss}"
            )
            steps = risk_percent_steps(MIN_RISK_PERCENT, MAX_RISK_PERCENT, RISK_INCREMENT)
            report = SizingReport(self.console)
            rows = report.render(sizer, steps)
        except TradeSizeError as error:
            logger.error(f"{type(error).__name__}: {error}")
            self.print_error(str(error))
            return error.exit_code

        logger.info(f"Reported {len(rows)} risk steps, shares={[row.shares for row in rows]}")
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    return TradeSizeCLI().run(args)


if __name__ == "__main__":
    sys.exit(main())
