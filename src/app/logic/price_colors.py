from typing import NamedTuple

from src.core.domain_models import PriceBounds


class RGBColor(NamedTuple):
    red: int
    green: int
    blue: int


# Tailwind gray-400, same as Colors.light_gray
MISSING_PRICE_COLOR = RGBColor(156, 163, 175)


def price_fraction(price: float, bounds: PriceBounds) -> float:
    """Relative position of `price` within `bounds`, clamped to [0, 1].

    Degenerate bounds (min == max) give 0.
    """
    if bounds.is_degenerate:
        return 0.0
    fraction = (price - bounds.min) / bounds.span
    return max(0.0, min(1.0, fraction))


def color_for_price(price: float | None, bounds: PriceBounds) -> RGBColor:
    """Green at the cheapest price, red at the most expensive, linear in between."""
    if price is None:
        return MISSING_PRICE_COLOR
    fraction = price_fraction(price, bounds)
    return RGBColor(
        red=round(fraction * 255),
        green=round((1 - fraction) * 255),
        blue=0,
    )


def to_css_rgb(color: RGBColor) -> str:
    return f"rgb({color.red}, {color.green}, {color.blue})"


def to_hex(color: RGBColor) -> str:
    return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"
