from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from typing import Iterable, List

from trade_size.core.currency import to_decimal
from trade_size.exception.exception import ZeroRiskError

HUNDRED = Decimal("100")
ZERO = Decimal("0")

MIN_RISK_PERCENT = Decimal("1.00")
MAX_RISK_PERCENT = Decimal("2.00")
RISK_INCREMENT = Decimal("0.25")


@dataclass(frozen=True)
class SizingRow:
    risk_percent: Decimal
    risk_equity: Decimal
    shares: int


@dataclass(frozen=True)
class PositionSizer:
    """Risk-based position sizing for a single trade.

    Inputs are not validated; derived figures are recomputed on every call.
    """

    account_equity: Decimal
    price: Decimal
    stop_loss: Decimal

    def __post_init__(self):
        for name in ("account_equity", "price", "stop_loss"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

    def per_unit_risk(self) -> Decimal:
        return self.price - self.stop_loss

    def risk_equity(self, risk_percent) -> Decimal:
        return self.account_equity * to_decimal(risk_percent) / HUNDRED

    def share_count(self, risk_percent) -> int:
        risk_per_unit = self.per_unit_risk()
        if risk_per_unit == ZERO:
            raise ZeroRiskError(self.price, self.stop_loss)
        ratio = self.risk_equity(risk_percent) / risk_per_unit
        # Whole units only; a negative ratio (stop above entry) sizes to nothing.
        return max(0, int(ratio.to_integral_value(rounding=ROUND_DOWN)))

    def sweep(self, risk_percents: Iterable) -> List[SizingRow]:
        return [
            SizingRow(
                risk_percent=to_decimal(pct),
                risk_equity=self.risk_equity(pct),
                shares=self.share_count(pct),
            )
            for pct in risk_percents
        ]


def risk_percent_steps(start, stop, step) -> List[Decimal]:
    """Inclusive decimal range, e.g. 1.00 -> 2.00 by 0.25 gives five steps."""
    start, stop, step = to_decimal(start), to_decimal(stop), to_decimal(step)
    if not all(value.is_finite() for value in (start, stop, step)):
        raise ValueError("Risk sweep bounds must be finite numbers.")
    if step <= ZERO:
        raise ValueError(f"Risk step must be positive, got {step}.")
    if start > stop:
        raise ValueError(f"Minimum risk {start}% exceeds maximum risk {stop}%.")

    steps = []
    current = start
    while current <= stop:
        steps.append(current)
        current += step
    return steps
