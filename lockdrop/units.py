import re
from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_UP, localcontext
from typing import Optional, Union

THOUSANDS = re.compile(r"^\d{1,3}(,\d{3})+(\.\d*)?$")


def parse_units(value: Union[str, int, Decimal], decimals: int) -> int:
    """
    Convert a human amount ("100.5") into a fixed-point integer with `decimals` places.

    An empty string parses to zero; fractional digits beyond `decimals`
    are rounded half-up.
    """
    if decimals < 0:
        raise ValueError("Decimals cannot be negative")
    if isinstance(value, float):
        raise ValueError("Floats are not accepted, pass a string or Decimal")
    if isinstance(value, str):
        value = value.strip().replace("_", "")
        if "," in value:
            # commas only as thousands separators, "1,5" is ambiguous
            if not THOUSANDS.match(value):
                raise ValueError(f"Invalid amount: {value!r}")
            value = value.replace(",", "")
        if value == "":
            return 0
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise ValueError("Amount cannot be negative")

    with localcontext() as ctx:
        # enough digits that scaling never rounds
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + decimals + 2)
        scaled = amount.scaleb(decimals)
        return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))


def format_units(
    value: int,
    decimals: int,
    precision: Optional[int] = None,
    grouping: bool = False,
) -> str:
    """Inverse of parse_units; `precision` truncates the fractional part."""
    if decimals < 0:
        raise ValueError("Decimals cannot be negative")
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10 ** decimals)

    if precision is not None:
        if precision < 0:
            raise ValueError("Precision cannot be negative")
        # truncate, never round a displayed amount up
        shown = Decimal(fraction).scaleb(-decimals).quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN)
        fraction_digits = format(shown, "f")[2:] if precision > 0 else ""
    else:
        fraction_digits = str(fraction).rjust(decimals, "0") if decimals > 0 else ""
    fraction_digits = fraction_digits.rstrip("0")

    whole_digits = f"{whole:,}" if grouping else str(whole)
    if fraction_digits:
        return f"{sign}{whole_digits}.{fraction_digits}"
    return f"{sign}{whole_digits}"
