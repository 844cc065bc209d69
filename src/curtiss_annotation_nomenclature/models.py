"""Data models for the annotation catalog, its index, and formatted output."""

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Entry:
    """One catalog row: an annotation or an emphasizer."""

    code: str  # e.g., "KC" or "*"
    name: str  # e.g., "KeyConcept"
    description: str

    def as_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class CatalogIndex:
    """Read-only lookup structures derived from one catalog."""

    label: str  # "annotation" or "emphasizer"
    entries: tuple[Entry, ...]  # Catalog order

    # Projections (all sealed, never rebuilt)
    name_to_code: Mapping[str, str]
    code_to_name: Mapping[str, str]
    code_to_description: Mapping[str, str]
    codes: tuple[str, ...]  # Same order as entries
    by_code: Mapping[str, Entry]
    by_name: Mapping[str, Entry]

    @property
    def size(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class AsciiRendering:
    """Linear text rendering. The parentheses in ``circle`` ARE the circle."""

    circle: str  # "(KC)"
    left: str  # "[1]" or ""
    right: str  # "*" or ""
    note: str  # Note text or ""
    annotation: str  # Complete line, e.g. "[1] (KC)* Note"


@dataclass(frozen=True)
class GraphicalRendering:
    """Discrete pieces for a UI that draws its own circle around ``circle_content``."""

    circle_content: str  # "KC", goes INSIDE the drawn circle
    top_left: str  # "[1]" or "", outside, top-left
    right: str  # "*" or "", outside, right
    note: str  # Note text or ""


@dataclass(frozen=True)
class FormattedAnnotation:
    """Both renderings of one annotation, plus the raw code for reference."""

    ascii: AsciiRendering
    graphical: GraphicalRendering
    code: str

    def as_dict(self) -> dict:
        """Plain nested dict using the keys UI callers serialize."""
        return {
            "ascii": {
                "circle": self.ascii.circle,
                "left": self.ascii.left,
                "right": self.ascii.right,
                "note": self.ascii.note,
                "annotation": self.ascii.annotation,
            },
            "graphical": {
                "circleContent": self.graphical.circle_content,
                "topLeft": self.graphical.top_left,
                "right": self.graphical.right,
                "note": self.graphical.note,
            },
            "code": self.code,
        }


@dataclass(frozen=True)
class Disclaimer:
    """Boilerplate users may attach to their own annotated material."""

    full: str
    short: str


@dataclass(frozen=True)
class EmphasizerGuidance:
    """Usage guidance for emphasizers (at most one per annotation)."""

    purpose: str
    recommendation: str
    note: str
