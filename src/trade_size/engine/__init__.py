from trade_size.engine.position_sizer import (
    MAX_RISK_PERCENT,
    MIN_RISK_PERCENT,
    RISK_INCREMENT,
    PositionSizer,
    SizingRow,
    risk_percent_steps,
)

__all__ = [
    "MAX_RISK_PERCENT",
    "MIN_RISK_PERCENT",
    "RISK_INCREMENT",
    "PositionSizer",
    "SizingRow",
    "risk_percent_steps",
]
