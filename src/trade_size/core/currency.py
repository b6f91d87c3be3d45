from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

CURRENCY_SYMBOL = "$"
CENT = Decimal("0.01")
MIN_PRECISION = 28


def to_decimal(value) -> Decimal:
    """Coerce ints, strings and floats to Decimal; floats go through str to avoid binary noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _two_places(value) -> Decimal:
    amount = to_decimal(value)
    # Enough digits for every integer place plus the two decimals, however large the amount.
    context = Context(prec=max(MIN_PRECISION, amount.adjusted() + 4), rounding=ROUND_HALF_UP)
    return amount.quantize(CENT, context=context)


def format_currency(value, symbol: str = CURRENCY_SYMBOL) -> str:
    """Render ``value`` as ``$1,234.56``; negatives put the sign before the symbol."""
    amount = _two_places(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{amount.copy_abs():,.2f}"


def parse_currency(text: str, symbol: str = CURRENCY_SYMBOL) -> Decimal:
    cleaned = str(text).strip()
    negative = cleaned.startswith("-")
    if negative:
        cleaned = cleaned[1:]
    if symbol and cleaned.startswith(symbol):
        cleaned = cleaned[len(symbol):]
    cleaned = cleaned.replace(",", "").strip()
    try:
        amount = Decimal(cleaned)
    except InvalidOperation as error:
        raise ValueError(f"Not a currency amount: {text!r}") from error
    return amount.copy_negate() if negative else amount


def format_percent(value) -> str:
    return f"{_two_places(value):.2f}"
