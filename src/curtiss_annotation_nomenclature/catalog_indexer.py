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

"""Catalog index builder.

Derives every lookup structure from an ordered list of entries in a single
pass, then seals the result so no caller can change shared state.
"""

import logging
from types import MappingProxyType
from typing import Iterable

from curtiss_annotation_nomenclature.models import CatalogIndex, Entry

logger = logging.getLogger(__name__)


def build_index(entries: Iterable[Entry], label: str = "catalog") -> CatalogIndex:
    """Build all six projections of a catalog in one pass.

    Steps:
    1. Snapshot the entries into a tuple (catalog order)
    2. For each entry, insert into name->code, code->name, code->description,
       the ordered code list, code->entry and name->entry at once
    3. Seal: wrap every dict in a MappingProxyType, every list in a tuple

    Duplicate codes or names are a data defect. They are logged and the
    later entry wins; building never raises.

    Returns:
        CatalogIndex whose containers reject item assignment.
    """
    # Step 1: snapshot
    snapshot = tuple(entries)

    # Step 2: single pass over all projections
    name_to_code: dict[str, str] = {}
    code_to_name: dict[str, str] = {}
    code_to_description: dict[str, str] = {}
    codes: list[str] = []
    by_code: dict[str, Entry] = {}
    by_name: dict[str, Entry] = {}

    for entry in snapshot:
        if entry.code in by_code:
            logger.warning("Duplicate %s code %r; keeping the later entry", label, entry.code)
        else:
            codes.append(entry.code)
        if entry.name in by_name:
            logger.warning("Duplicate %s name %r; keeping the later entry", label, entry.name)

        name_to_code[entry.name] = entry.code
        code_to_name[entry.code] = entry.name
        code_to_description[entry.code] = entry.description
        by_code[entry.code] = entry
        by_name[entry.name] = entry

    # Step 3: seal
    index = CatalogIndex(
        label=label,
        entries=snapshot,
        name_to_code=MappingProxyType(name_to_code),
        code_to_name=MappingProxyType(code_to_name),
        code_to_description=MappingProxyType(code_to_description),
        codes=tuple(codes),
        by_code=MappingProxyType(by_code),
        by_name=MappingProxyType(by_name),
    )

    logger.info("Indexed %d %s entries", index.size, label)
    return index
