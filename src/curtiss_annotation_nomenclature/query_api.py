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

"""Catalog query API for REPL and tool use.

Provides a factory that creates a dictionary of query functions bound to a
Catalog. All functions return plain dicts/strings for easy use in a REPL;
failures come back as data rather than exceptions.
"""

from __future__ import annotations

from typing import Callable

from curtiss_annotation_nomenclature.catalog import Catalog


def create_catalog_query_functions(catalog: Catalog) -> dict[str, Callable]:
    """Create query functions bound to one catalog.

    Returns a dict mapping function names to callables. Each function returns
    plain dicts or strings suitable for printing in a REPL.
    """

    def get_catalog_summary() -> str:
        """One line per entry: "CODE - Name: description"."""
        parts = [f"Catalog: {catalog.label} ({len(catalog)} entries)"]
        for entry in catalog.list_all():
            parts.append(f"{entry.code} - {entry.name}: {entry.description}")
        return "\n".join(parts)

    def describe_code(code: str) -> dict:
        """Full entry for a code."""
        entry = catalog.get_by_code(code)
        if entry is None:
            return {"error": f"code '{code}' not found in {catalog.label} catalog"}
        return entry.as_dict()

    def describe_name(name: str) -> dict:
        """Full entry for a name."""
        entry = catalog.get_by_name(name)
        if entry is None:
            return {"error": f"name '{name}' not found in {catalog.label} catalog"}
        return entry.as_dict()

    def list_codes() -> list[str]:
        """All codes in catalog order."""
        return list(catalog.codes)

    def list_options() -> list[dict]:
        """Options for a picker UI: label, value, description."""
        return [
            {
                "label": f"{entry.code} - {entry.name}",
                "value": entry.code,
                "description": entry.description,
            }
            for entry in catalog.list_all()
        ]

    def search_entries(query: str, max_results: int = 0) -> list[dict]:
        """Case-insensitive substring search over code, name and description."""
        if not isinstance(query, str) or not query:
            return [{"error": "query must be a non-empty string"}]
        if not isinstance(max_results, int):
            return [{"error": "max_results must be an integer"}]
        q = query.lower()
        results = [
            entry.as_dict()
            for entry in catalog.list_all()
            if q in entry.code.lower()
            or q in entry.name.lower()
            or q in entry.description.lower()
        ]
        if max_results > 0:
            results = results[:max_results]
        return results

    def group_entries(groups: dict[str, list[str]]) -> dict[str, list[dict]]:
        """Entries for named groups of codes. Unknown codes are skipped."""
        if not isinstance(groups, dict):
            return {"error": "groups must map group names to lists of codes"}
        result: dict[str, list[dict]] = {}
        for group_name, codes in groups.items():
            members = []
            for code in codes:
                entry = catalog.get_by_code(code)
                if entry is not None:
                    members.append(entry.as_dict())
            result[group_name] = members
        return result

    return {
        "get_catalog_summary": get_catalog_summary,
        "describe_code": describe_code,
        "describe_name": describe_name,
        "list_codes": list_codes,
        "list_options": list_options,
        "search_entries": search_entries,
        "group_entries": group_entries,
    }


# ---------------------------------------------------------------------------
# System prompt instructions
# ---------------------------------------------------------------------------

NOMENCLATURE_QUERY_INSTRUCTIONS = """\
Your REPL environment includes lookup functions for the annotation catalog.
Each catalog (annotations, emphasizers) gets its own set of these functions.

OVERVIEW:
  get_catalog_summary() -> str                 # Every code with name and description
  list_codes() -> list[str]                    # Codes in catalog order

LOOKUP:
  describe_code(code) -> dict                  # {code, name, description} or {error}
  describe_name(name) -> dict                  # Same, keyed by name (e.g. "KeyConcept")

BROWSING:
  list_options() -> list[dict]                 # {label, value, description} for pickers
  search_entries(query, max_results?) -> list  # Case-insensitive substring search
  group_entries({group: [codes]}) -> dict      # Entries for named groups of codes

FORMAT: An annotation renders as "[n] (CODE)E note", where [n] is an optional
occurrence count, E an optional emphasizer (+, -, *) touching the circle, and
note optional free text. Use at most one emphasizer per annotation.
"""
