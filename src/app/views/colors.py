# Define a static color class for consistent use across the app

from src.app.logic.price_colors import MISSING_PRICE_COLOR, to_hex


class Colors:
    # Text
    gray = "#4b5563"  # Gray 600 (secondary text)
    light_gray = to_hex(MISSING_PRICE_COLOR)  # Gray 400 (unknown price)
    white = "#ffffff"

    # Semantic: Danger (Red 600, clear but not glaring)
    red = "#dc2626"


# Text color on price badges
BADGE_TEXT_COLOR = Colors.white
