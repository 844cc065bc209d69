# curtiss-annotation-nomenclature - Reference catalog of reading annotation codes
# Copyright (C) 2026 Michael Doyle
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Commercial licensing available. See COMMERCIAL-LICENSE.md for details.

"""Annotation formatter producing text and graphical renderings.

The formatter is a pure function of its arguments. It never consults the
catalogs and never validates: whatever code it is given is wrapped in
parentheses as-is. Use nomenclature.is_valid_code beforehand if needed.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from curtiss_annotation_nomenclature.models import (
    AsciiRendering,
    FormattedAnnotation,
    GraphicalRendering,
)


def format_annotation(
    code: str,
    emphasizer: str | None = None,
    occurrence_count: int | None = None,
    note: str | None = None,
) -> FormattedAnnotation:
    """Render one annotation for plain text and for a UI that draws its own circle.

    Layout rules:
      1. left = "[n]" when occurrence_count is given and non-zero, else ""
         (zero is suppressed, never rendered as "[0]")
      2. right = the emphasizer, or "" when absent or empty
      3. note = the note, or "" when absent or empty
      4. circle = "(" + code + ")"
      5. The emphasizer touches the circle: "(KC)*", never "(KC) *"
      6. ascii.annotation joins the non-empty parts of
         [left, circle + right, note] with single spaces

    The graphical rendering carries the bare code (no parentheses) and no
    pre-joined line; the caller positions the pieces around its own circle.

    Examples:
        format_annotation("KC").ascii.annotation                 -> "(KC)"
        format_annotation("Q", occurrence_count=1).ascii.annotation -> "[1] (Q)"
        format_annotation("KC", "*", 5, "Thesis").ascii.annotation
                                                     -> "[5] (KC)* Thesis"
    """
    code_text = str(code)
    left_text = f"[{occurrence_count}]" if occurrence_count else ""
    right_text = str(emphasizer) if emphasizer else ""
    note_text = str(note) if note else ""
    circle_text = f"({code_text})"

    circle_with_emphasizer = circle_text + right_text
    parts = [part for part in (left_text, circle_with_emphasizer, note_text) if part]

    return FormattedAnnotation(
        ascii=AsciiRendering(
            circle=circle_text,
            left=left_text,
            right=right_text,
            note=note_text,
            annotation=" ".join(parts),
        ),
        graphical=GraphicalRendering(
            circle_content=code_text,
            top_left=left_text,
            right=right_text,
            note=note_text,
        ),
        code=code_text,
    )


def format_annotations(items: Iterable[Mapping[str, Any]]) -> list[FormattedAnnotation]:
    """Format many annotations given as keyword mappings, preserving order.

    Each mapping supplies ``code`` and optionally ``emphasizer``,
    ``occurrence_count`` and ``note``. Other keys are ignored.
    """
    return [
        format_annotation(
            item["code"],
            emphasizer=item.get("emphasizer"),
            occurrence_count=item.get("occurrence_count"),
            note=item.get("note"),
        )
        for item in items
    ]
