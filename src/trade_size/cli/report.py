from typing import List, Optional

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.segment import Segments
from rich.table import Table

from trade_size.core.currency import CURRENCY_SYMBOL, format_currency, format_percent
from trade_size.engine.position_sizer import PositionSizer, SizingRow

INPUT_HEADERS = ("Equity", "Price", "Stop-loss", "Per-unit Risk")
RISK_HEADERS = ("% Risk", "Risk Equity", "Shares")
UNBOUNDED_WIDTH = 10_000


def _right_aligned_table(headers) -> Table:
    table = Table(box=box.SQUARE, show_header=True, header_style="bold")
    for header in headers:
        table.add_column(header, justify="right", no_wrap=True, overflow="ignore")
    return table


def build_input_table(sizer: PositionSizer, currency_symbol: str = CURRENCY_SYMBOL) -> Table:
    table = _right_aligned_table(INPUT_HEADERS)
    table.add_row(
        format_currency(sizer.account_equity, currency_symbol),
        format_currency(sizer.price, currency_symbol),
        format_currency(sizer.stop_loss, currency_symbol),
        format_currency(sizer.per_unit_risk(), currency_symbol),
    )
    return table


def build_risk_table(rows: List[SizingRow], currency_symbol: str = CURRENCY_SYMBOL) -> Table:
    table = _right_aligned_table(RISK_HEADERS)
    for row in rows:
        table.add_row(
            format_percent(row.risk_percent),
            format_currency(row.risk_equity, currency_symbol),
            str(row.shares),
        )
    return table


def print_padded(console: Console, label: str):
    console.print()
    console.print(label)


def print_unclipped(console: Console, table: Table):
    """Print ``table`` at its natural width, wider than the console if its cells need it."""
    options = console.options.update_width(UNBOUNDED_WIDTH)
    width = Measurement.get(console, options, table).maximum
    segments = console.render(table, options.update_width(width))
    console.print(Segments(segments), crop=False)


class SizingReport:
    """Inputs and Outputs tables for one trade, printed to a rich console."""

    def __init__(self, console: Optional[Console] = None, currency_symbol: str = CURRENCY_SYMBOL):
        self.console = console or Console()
        self.currency_symbol = currency_symbol

    def render(self, sizer: PositionSizer, risk_percents) -> List[SizingRow]:
        # Compute every row before printing so a sizing error leaves no partial report.
        rows = sizer.sweep(risk_percents)
        input_table = build_input_table(sizer, self.currency_symbol)
        risk_table = build_risk_table(rows, self.currency_symbol)

        print_padded(self.console, "Inputs:")
        print_unclipped(self.console, input_table)
        print_padded(self.console, "Outputs:")
        print_unclipped(self.console, risk_table)
        return rows
