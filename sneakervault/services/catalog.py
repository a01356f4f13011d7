"""Static sneaker catalogs: shoe sizes, condition grades and collection labels."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SizeConversion:
    us: str
    uk: str
    eu: str


@dataclass(frozen=True)
class Label:
    value: str
    label: str
    color: str


SHOE_SIZES: list[SizeConversion] = [
    SizeConversion("4", "3.5", "36"),
    SizeConversion("4.5", "4", "36.5"),
    SizeConversion("5", "4.5", "37.5"),
    SizeConversion("5.5", "5", "38"),
    SizeConversion("6", "5.5", "38.5"),
    SizeConversion("6.5", "6", "39"),
    SizeConversion("7", "6", "40"),
    SizeConversion("7.5", "6.5", "40.5"),
    SizeConversion("8", "7", "41"),
    SizeConversion("8.5", "7.5", "42"),
    SizeConversion("9", "8", "42.5"),
    SizeConversion("9.5", "8.5", "43"),
    SizeConversion("10", "9", "44"),
    SizeConversion("10.5", "9.5", "44.5"),
    SizeConversion("11", "10", "45"),
    SizeConversion("11.5", "10.5", "45.5"),
    SizeConversion("12", "11", "46"),
    SizeConversion("12.5", "11.5", "47"),
    SizeConversion("13", "12", "47.5"),
    SizeConversion("14", "13", "48.5"),
    SizeConversion("15", "14", "49.5"),
]

CONDITIONS: dict[str, str] = {
    "DS": "Deadstock (DS)",
    "VNDS": "Very Near Deadstock (VNDS)",
    "10": "10 - Like new",
    "9": "9 - Excellent",
    "8": "8 - Great",
    "7": "7 - Good",
    "6": "6 - Acceptable",
    "5": "5 - Worn",
    "4": "4 - Very worn",
    "3": "3 - Heavily worn",
    "2": "2 - Poor",
    "1": "1 - Very poor",
}

LABELS: list[Label] = [
    Label("need-to-clean", "Need to Clean", "#f59e0b"),
    Label("want-to-sell", "Want to Sell", "#10b981"),
    Label("favorite", "Favorite", "#ec4899"),
    Label("worn-recently", "Worn Recently", "#3b82f6"),
    Label("not-worn", "Not Worn", "#6366f1"),
    Label("damaged", "Damaged", "#ef4444"),
    Label("restored", "Restored", "#8b5cf6"),
    Label("limited-edition", "Limited Edition", "#f97316"),
]

DEFAULT_LABEL_COLOR = "#737373"


def get_size_conversion(us_size: str) -> SizeConversion | None:
    """Look up the UK/EU equivalents of a US men's size."""
    us_size = us_size.strip()
    return next((size for size in SHOE_SIZES if size.us == us_size), None)


def valid_label_values() -> set[str]:
    return {label.value for label in LABELS}


def get_label(value: str) -> Label | None:
    return next((label for label in LABELS if label.value == value), None)


def label_color(value: str) -> str:
    label = get_label(value)
    return label.color if label else DEFAULT_LABEL_COLOR
