"""Amount sanitisation, display formatting and edit buffers.

Text typed by a user is sanitised rather than rejected: thousands separators
and stray characters are dropped, and anything that still is not a number
counts as zero.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

CURRENCY_SYMBOLS: dict[str, str] = {
    "AUD": "$",
    "NZD": "$",
    "USD": "US$",
    "GBP": "£",
    "EUR": "€",
}

_NON_NUMERIC = re.compile(r"[^\d.]")
_LEADING_ZEROS = re.compile(r"^0+(?=\d)")


def strip_non_numeric(raw: str) -> str:
    """Drop thousands separators and anything that is not a digit or '.'."""
    return _NON_NUMERIC.sub("", raw.replace(",", ""))


def sanitize_amount_text(raw: str) -> str:
    return _LEADING_ZEROS.sub("", strip_non_numeric(raw))


def parse_amount(raw: str) -> Decimal:
    """Convert free text to a Decimal. Empty or unparseable text is 0."""
    cleaned = strip_non_numeric(raw)
    if not cleaned:
        return Decimal("0")
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")


def _quantize(amount: Decimal, quantum: Decimal) -> Decimal:
    # Typed text can hold more digits than the default context precision.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() - quantum.adjusted() + 2)
        return amount.quantize(quantum, rounding=ROUND_HALF_UP)


def format_number(amount: Decimal) -> str:
    """Grouped number with at most 2 decimals and no trailing zeros (1,234.5)."""
    text = f"{_quantize(amount, Decimal('0.01')):,.2f}"
    return text.rstrip("0").rstrip(".")


def format_currency(amount: Decimal, places: int = 2, currency: str = "AUD") -> str:
    """Format an amount as currency, e.g. ``$1,234.50`` or ``-$80``.

    ``places=0`` gives the rounded headline figure.
    """
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    quantum = Decimal(1).scaleb(-places)
    value = _quantize(amount, quantum)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{places}f}"


class AmountField:
    """Edit buffer for one monetary input.

    ``text`` is what the user sees and edits; ``value`` is the last committed
    amount. Focusing strips formatting (and clears a lone zero), blurring
    parses the text, commits it and reformats it.
    """

    def __init__(self, value: Decimal = Decimal("0")) -> None:
        self.value = value
        self.text = format_number(value) if value else ""

    def focus(self) -> str:
        self.text = strip_non_numeric(self.text)
        if self.text == "0":
            self.text = ""
        return self.text

    def edit(self, raw: str) -> str:
        self.text = sanitize_amount_text(raw)
        return self.text

    def blur(self) -> Decimal:
        raw = strip_non_numeric(self.text)
        try:
            self.value = Decimal(raw) if raw else Decimal("0")
        except InvalidOperation:
            self.value = Decimal("0")
            self.text = ""
            return self.value
        self.text = format_number(self.value) if raw else ""
        return self.value
