"""
Result model for a computed style analysis run.

The serialized shape is the primary artifact consumed by the viewer:

    [{"name": "Button", "elements": [{"selector": "button", "styles": {...}}]}]
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .errors import AnalysisDataError
from .styles import freeze_styles, styles_equal
from .taxonomy import ComponentKind


@dataclass(frozen=True)
class RepresentativeElement:
    """One deduplicated element standing in for all look-alikes in its category"""
    selector: str
    styles: Mapping[str, str]

    # styles is a mapping proxy, which cannot be hashed
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "styles", freeze_styles(self.styles))

    def to_dict(self) -> Dict[str, Any]:
        return {"selector": self.selector, "styles": dict(self.styles)}


@dataclass
class CategoryResult:
    """Representatives found for one category, in discovery order"""
    name: str
    elements: List[RepresentativeElement] = field(default_factory=list)

    @property
    def kind(self) -> ComponentKind:
        return ComponentKind.from_name(self.name)

    def find_equal(self, element: RepresentativeElement) -> Optional[RepresentativeElement]:
        for existing in self.elements:
            if styles_equal(existing.styles, element.styles):
                return existing
        return None

    def add(self, element: RepresentativeElement) -> bool:
        """Append unless an equal representative exists. Returns True if appended."""
        if self.find_equal(element) is not None:
            return False
        self.elements.append(element)
        return True

    def __len__(self) -> int:
        return len(self.elements)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "elements": [e.to_dict() for e in self.elements]}


@dataclass
class ExtractionStats:
    """Counters collected while extracting; logged, never serialized"""
    rules_tried: int = 0
    rules_without_match: int = 0
    rules_failed: int = 0
    elements_seen: int = 0
    duplicates_discarded: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "rules_tried": self.rules_tried,
            "rules_without_match": self.rules_without_match,
            "rules_failed": self.rules_failed,
            "elements_seen": self.elements_seen,
            "duplicates_discarded": self.duplicates_discarded,
        }


class AnalysisResult:
    """Ordered category results; categories without elements are never kept."""

    def __init__(self, categories: Optional[List[CategoryResult]] = None):
        self._categories: List[CategoryResult] = []
        self.stats = ExtractionStats()
        for category in categories or []:
            self.append(category)

    def append(self, category: CategoryResult) -> bool:
        if not category.elements:
            return False
        self._categories.append(category)
        return True

    def names(self) -> List[str]:
        return [c.name for c in self._categories]

    def get(self, name: str) -> Optional[CategoryResult]:
        key = (name or "").lower()
        for category in self._categories:
            if category.name.lower() == key:
                return category
        return None

    def __iter__(self) -> Iterator[CategoryResult]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __getitem__(self, index: int) -> CategoryResult:
        return self._categories[index]

    def __repr__(self) -> str:
        return f"AnalysisResult({self.names()!r})"

    def to_list(self) -> List[Dict[str, Any]]:
        return [c.to_dict() for c in self._categories]

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_list(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "AnalysisResult":
        """
        Build a result from a decoded artifact.

        Accepts the bare list written by the analyzer as well as the older
        ``{"components": [...]}`` wrapper. Elements are kept exactly as
        written; deduplication only happens during extraction.

        Raises:
            AnalysisDataError: if the payload has neither shape
        """
        if isinstance(payload, dict) and "components" in payload:
            payload = payload["components"]
        if not isinstance(payload, list):
            raise AnalysisDataError(
                f"Expected a list of components, got {type(payload).__name__}"
            )

        result = cls()
        for index, entry in enumerate(payload):
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                raise AnalysisDataError(f"Component #{index} has no name")
            elements = entry.get("elements")
            if not isinstance(elements, list):
                raise AnalysisDataError(f"Component {entry['name']!r} has no element list")
            category = CategoryResult(entry["name"])
            for element in elements:
                if not isinstance(element, dict):
                    raise AnalysisDataError(f"Malformed element in {entry['name']!r}")
                selector = element.get("selector")
                styles = element.get("styles")
                if not isinstance(selector, str) or not isinstance(styles, dict):
                    raise AnalysisDataError(
                        f"Element in {entry['name']!r} needs a selector and a styles mapping"
                    )
                category.elements.append(RepresentativeElement(selector, styles))
            result.append(category)
        return result

    @classmethod
    def from_json(cls, text: str) -> "AnalysisResult":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise AnalysisDataError(f"Analysis data is not valid JSON: {e}") from e
        return cls.from_payload(payload)
