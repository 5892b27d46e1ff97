from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
FREE_SHIPPING_THRESHOLD = Decimal("99")
SHIPPING_FLAT_RATE = Decimal("5.99")
TAX_RATE = Decimal("0.08")


def to_decimal(value) -> Decimal:
    return Decimal(str(value))


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_money(value: Decimal) -> float:
    return float(round_cents(value))


def line_total(unit_price, quantity: int) -> Decimal:
    return to_decimal(unit_price) * quantity
