"""
Component taxonomy - the categories the extractor looks for.

Each category carries an ordered list of selection rules. Every rule is
evaluated; earlier rules simply contribute their representatives first.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple


class ComponentKind(Enum):
    """Known component kinds, keyed by display name."""

    BUTTON = "Button"
    INPUT = "Input"
    CARD = "Card"
    MODAL = "Modal"
    NAVIGATION = "Navigation"
    LINK = "Link"
    TEXT = "Text"
    CHECKBOX = "Checkbox"
    RADIO = "Radio"
    SWITCH = "Switch"
    SLIDER = "Slider"
    PROGRESS = "Progress"
    TOOLTIP = "Tooltip"
    UNRECOGNIZED = "Unrecognized"

    @classmethod
    def from_name(cls, name: str) -> "ComponentKind":
        """Case-insensitive lookup; unknown names map to UNRECOGNIZED."""
        key = (name or "").strip().lower()
        for kind in cls:
            if kind is not cls.UNRECOGNIZED and kind.value.lower() == key:
                return kind
        return cls.UNRECOGNIZED


@dataclass(frozen=True)
class Category:
    """A named component category with its ordered selection rules"""
    name: str
    rules: Tuple[str, ...]

    @property
    def kind(self) -> ComponentKind:
        return ComponentKind.from_name(self.name)


DEFAULT_CATEGORIES: Tuple[Category, ...] = (
    Category("Button", (
        'button',
        '[role="button"]',
        '.btn',
        '.button',
        '[class*="button"]',
        '[class*="btn"]',
    )),
    Category("Input", (
        'input',
        'textarea',
        '[role="textbox"]',
        '[class*="input"]',
        '[class*="textarea"]',
    )),
    Category("Card", (
        '.card',
        '[class*="card"]',
        '[role="article"]',
        '[class*="tile"]',
    )),
    Category("Modal", (
        '.modal',
        '[class*="modal"]',
        '[role="dialog"]',
        '[class*="dialog"]',
    )),
    Category("Navigation", (
        'nav',
        '[role="navigation"]',
        '[class*="nav"]',
        '[class*="menu"]',
    )),
    Category("Link", (
        'a',
        '[role="link"]',
        '[class*="link"]',
    )),
    Category("Text", (
        'p',
        'h1',
        'h2',
        'h3',
        'h4',
        'h5',
        'h6',
        '[class*="text"]',
    )),
    Category("Checkbox", (
        'input[type="checkbox"]',
        '[class*="checkbox"]',
    )),
    Category("Radio", (
        'input[type="radio"]',
        '[class*="radio"]',
    )),
    Category("Switch", (
        '[class*="switch"]',
    )),
    Category("Slider", (
        'input[type="range"]',
        '[class*="slider"]',
    )),
    Category("Progress", (
        'progress',
        '[class*="progress"]',
    )),
    Category("Tooltip", (
        'div[role="tooltip"]',
        '[class*="tooltip"]',
    )),
)


def select_categories(
    names: Iterable[str],
    categories: Iterable[Category] = DEFAULT_CATEGORIES,
) -> List[Category]:
    """
    Restrict a taxonomy to the given category names, keeping taxonomy order.

    Raises:
        KeyError: if a name matches no category
    """
    categories = list(categories)
    typed = {}
    for name in names:
        typed.setdefault((name or "").strip().lower(), (name or "").strip())
    wanted = set(typed)
    known = {c.name.lower() for c in categories}
    unknown = [typed[key] for key in sorted(wanted - known)]
    if unknown:
        raise KeyError(f"Unknown categories: {', '.join(unknown)}")
    return [c for c in categories if c.name.lower() in wanted]
