"""
Captured style attributes and the visual equality policy.

Every matched element is captured with the full STYLE_PROPERTIES list, but two
elements of the same category count as the same component when they agree on
IDENTITY_PROPERTIES only. Layout differences such as width or margin do not
make a new variant.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

STYLE_PROPERTIES: Tuple[str, ...] = (
    "color",
    "background-color",
    "font-family",
    "font-size",
    "font-weight",
    "line-height",
    "text-transform",
    "letter-spacing",
    "padding",
    "margin",
    "border",
    "border-radius",
    "box-shadow",
    "display",
    "width",
    "height",
)

IDENTITY_PROPERTIES: Tuple[str, ...] = (
    "color",
    "background-color",
    "font-family",
    "font-size",
    "border-radius",
)

# Values treated as "not meaningfully set" for display
UNSET_VALUES = frozenset({"", "none", "0px"})


def identity_key(styles: Mapping[str, str]) -> Tuple[str, ...]:
    """Projection of a style mapping onto the identity properties."""
    return tuple(styles.get(prop, "") or "" for prop in IDENTITY_PROPERTIES)


def styles_equal(a: Mapping[str, str], b: Mapping[str, str]) -> bool:
    """
    Visual equality of two captured style mappings.

    Missing and empty values compare as plain strings, so two elements that
    both lack an identity property still agree on it.
    """
    return identity_key(a) == identity_key(b)


def is_meaningful(value: Optional[str]) -> bool:
    return value is not None and value not in UNSET_VALUES


def visible_styles(styles: Mapping[str, str]) -> Dict[str, str]:
    """Meaningful styles only, in captured order. The input is left untouched."""
    return {prop: value for prop, value in styles.items() if is_meaningful(value)}


def freeze_styles(raw: Mapping[str, Any]) -> Mapping[str, str]:
    """Read-only copy of a captured style mapping; ``None`` values become ``""``."""
    return MappingProxyType({
        str(prop): "" if value is None else str(value)
        for prop, value in raw.items()
    })
