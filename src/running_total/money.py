"""Fixed-point monetary amounts: parsing, formatting and arithmetic."""

from pydantic import BaseModel, ConfigDict, Field


class AmountParseError(ValueError):
    """Raised when text cannot be read as an amount of the given currency."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class Currency(BaseModel):
    """An ISO 4217 currency with a fixed minor-unit exponent."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="ISO 4217 alphabetic code, e.g. 'USD'.")
    symbol: str = Field(..., description="Symbol prefixed to formatted amounts.")
    exponent: int = Field(2, ge=0, description="Number of minor-unit digits.")


USD = Currency(code="USD", symbol="$", exponent=2)

# Whole-part digits accepted from input; keeps totals far below the
# interpreter limit on int to str conversion
MAX_DIGITS = 100


class Money(BaseModel):
    """A signed amount stored as an exact count of minor units."""

    model_config = ConfigDict(frozen=True)

    minor_units: int = Field(0, description="Signed amount in minor units (e.g. cents).")
    currency: Currency = Field(USD, description="Currency of the amount.")

    @classmethod
    def zero(cls, currency: Currency = USD) -> "Money":
        return cls(minor_units=0, currency=currency)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency != self.currency:
            raise ValueError(
                f"Cannot add {other.currency.code} to {self.currency.code}"
            )
        return Money(minor_units=self.minor_units + other.minor_units, currency=self.currency)

    def __str__(self) -> str:
        return format_amount(self)


def _invalid() -> AmountParseError:
    return AmountParseError("Invalid amount")


def parse_amount(text: str, currency: Currency = USD) -> Money:
    """
    Parse a signed amount such as '10', '-2.50', '+$1,000.5'.

    Args:
        text: Raw user input
        currency: Currency the amount is expressed in

    Returns:
        The parsed amount

    Raises:
        AmountParseError: If the text is not a valid amount for the currency
    """
    s = text.strip()

    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if currency.symbol and s.startswith(currency.symbol):
        s = s[len(currency.symbol):]

    whole, _, fraction = s.partition(".")
    # Digit separators are dropped wherever they appear in the whole part
    whole = whole.replace(",", "")

    if not whole and not fraction:
        raise _invalid()
    if not (whole.isdigit() or whole == "") or not (fraction.isdigit() or fraction == ""):
        raise _invalid()
    if not whole.isascii() or not fraction.isascii():
        raise _invalid()

    if len(fraction) > currency.exponent:
        raise AmountParseError(
            f"Too many decimal places for {currency.code} (max {currency.exponent})"
        )
    if len(whole) > MAX_DIGITS:
        raise AmountParseError(f"Amount too long (max {MAX_DIGITS} digits)")

    minor_units = int(whole or "0") * 10 ** currency.exponent
    if currency.exponent:
        minor_units += int(fraction.ljust(currency.exponent, "0"))
    return Money(minor_units=sign * minor_units, currency=currency)


def format_amount(money: Money) -> str:
    """Render an amount as e.g. '$1,234.50' or '-$2.50'."""
    exponent = money.currency.exponent
    major, minor = divmod(abs(money.minor_units), 10 ** exponent)

    text = f"{money.currency.symbol}{major:,}"
    if exponent:
        text += f".{minor:0{exponent}d}"
    return f"-{text}" if money.minor_units < 0 else text


def is_positive(money: Money) -> bool:
    """Return True if the amount is strictly greater than zero."""
    return money.minor_units > 0
