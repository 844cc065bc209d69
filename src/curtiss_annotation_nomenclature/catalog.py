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

"""Per-catalog accessors over a sealed CatalogIndex."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Mapping

from curtiss_annotation_nomenclature.catalog_indexer import build_index
from curtiss_annotation_nomenclature.models import CatalogIndex, Entry


def _as_key(value: object) -> str | None:
    """Reduce a lookup key to a plain string; generated enum members hash by name."""
    if isinstance(value, Enum):
        value = value.value
    return value if isinstance(value, str) else None


class Catalog:
    """A fixed, ordered set of entries with lookup and validation.

    The index is built once in the constructor and never rebuilt. Every
    accessor that returns a container hands back the same sealed instance
    on each call, so callers may rely on identity for memoization.
    """

    def __init__(self, entries: Iterable[Entry], label: str = "catalog"):
        self._index: CatalogIndex = build_index(entries, label=label)
        self._enums: dict[str, type[Enum]] = {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_by_code(self, code: str) -> Entry | None:
        """Exact, case-sensitive lookup by code. None when absent."""
        key = _as_key(code)
        return None if key is None else self._index.by_code.get(key)

    def get_by_name(self, name: str) -> Entry | None:
        """Exact, case-sensitive lookup by name. None when absent."""
        if isinstance(name, Enum):
            name = name.name
        if not isinstance(name, str):
            return None
        return self._index.by_name.get(name)

    def is_valid_code(self, value: str) -> bool:
        key = _as_key(value)
        return key is not None and key in self._index.by_code

    def list_all(self) -> tuple[Entry, ...]:
        """All entries in catalog order (the identical tuple on every call)."""
        return self._index.entries

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    @property
    def label(self) -> str:
        return self._index.label

    @property
    def index(self) -> CatalogIndex:
        return self._index

    @property
    def codes(self) -> tuple[str, ...]:
        return self._index.codes

    @property
    def name_to_code(self) -> Mapping[str, str]:
        return self._index.name_to_code

    @property
    def code_to_name(self) -> Mapping[str, str]:
        return self._index.code_to_name

    @property
    def code_to_description(self) -> Mapping[str, str]:
        return self._index.code_to_description

    def build_code_enum(self, enum_name: str, module: str | None = None) -> type[Enum]:
        """Generate a ``(str, Enum)`` with entry names as members and codes as values.

        ``AnnotationCode.KeyConcept == "KC"``. Generated from the catalog so it
        can never drift from the rows. Built once per name; later calls return
        the same class.
        """
        if enum_name not in self._enums:
            self._enums[enum_name] = Enum(
                enum_name, list(self._index.name_to_code.items()), type=str, module=module
            )
        return self._enums[enum_name]

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._index.size

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._index.entries)

    def __contains__(self, code: object) -> bool:
        return self.is_valid_code(code)

    def __repr__(self) -> str:
        return f"Catalog(label={self.label!r}, size={self._index.size})"
