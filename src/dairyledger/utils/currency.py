"""Currency formatting for rupee amounts."""

from decimal import Decimal, ROUND_HALF_UP

CURRENCY_SYMBOL = "₹"


def group_indian(digits: str) -> str:
    """Insert Indian-style separators: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_inr(amount: Decimal, signed: bool = False) -> str:
    """Format an amount as rupees with Indian digit grouping.

    Whole amounts are shown without decimals ("₹1,25,000"); fractional
    amounts keep two places ("₹1,250.50"). The sign is dropped unless
    ``signed`` is set, in which case "+" or "-" is prefixed.

    Args:
        amount: Amount to format
        signed: Prefix the sign of the amount

    Returns:
        Formatted amount string
    """
    value = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    magnitude = abs(value)
    whole, _, fraction = f"{magnitude:.2f}".partition(".")
    text = group_indian(whole)
    if fraction != "00":
        text = f"{text}.{fraction}"

    prefix = ""
    if signed:
        prefix = "-" if value < 0 else "+"
    return f"{prefix}{CURRENCY_SYMBOL}{text}"


def format_quantity(quantity: Decimal) -> str:
    """Format a milk quantity in litres with one decimal place."""
    return f"{Decimal(quantity).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)} L"
