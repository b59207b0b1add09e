from enum import Enum

from utils.constants import CATEGORY_COLORS, FALLBACK_COLOR


class Category(str, Enum):
    """Known category labels. Only used for default color lookup."""

    FOOD = "Food"
    TRAVEL = "Travel"
    BILLS = "Bills"
    SALARY = "Salary"
    SHOPPING = "Shopping"
    OTHER = "Other"

    @property
    def color_hex(self) -> str:
        return CATEGORY_COLORS[self.value]


CATEGORY_NAMES = [c.value for c in Category]
CATEGORY_PALETTE = [c.color_hex for c in Category]


def color_for(category: str) -> str:
    """Display color for a category label; unknown labels get the fallback."""
    try:
        return Category(category).color_hex
    except ValueError:
        return FALLBACK_COLOR
