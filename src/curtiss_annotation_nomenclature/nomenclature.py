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

"""Public lookup surface for the annotation and emphasizer catalogs.

Both catalogs are built once, when this module is first imported, and live
for the rest of the process. Nothing here mutates them afterwards, so any
number of threads may read them without locking.

Usage:
    from curtiss_annotation_nomenclature import nomenclature

    nomenclature.get_entry("KC").name            # "KeyConcept"
    nomenclature.is_valid_emphasizer_code("*")   # True
    nomenclature.AnnotationCode.KeyConcept       # "KC"
"""

import logging

from curtiss_annotation_nomenclature.catalog import Catalog
from curtiss_annotation_nomenclature.catalog_data import (
    ANNOTATION_ENTRIES,
    DISCLAIMER,
    EMPHASIZER_ENTRIES,
    EMPHASIZER_GUIDANCE,
    VERSION,
)
from curtiss_annotation_nomenclature.models import Entry

logger = logging.getLogger(__name__)

__all__ = [
    "ANNOTATIONS",
    "EMPHASIZERS",
    "AnnotationCode",
    "EmphasizerCode",
    "VERSION",
    "DISCLAIMER",
    "EMPHASIZER_GUIDANCE",
    "get_entry",
    "get_entry_by_name",
    "list_all_entries",
    "is_valid_code",
    "get_emphasizer",
    "get_emphasizer_by_name",
    "list_all_emphasizers",
    "is_valid_emphasizer_code",
]

# ---------------------------------------------------------------------------
# Process-wide catalogs
# ---------------------------------------------------------------------------

ANNOTATIONS = Catalog(ANNOTATION_ENTRIES, label="annotation")
EMPHASIZERS = Catalog(EMPHASIZER_ENTRIES, label="emphasizer")

# An emphasized code such as "*KC" is only unambiguous if no code lives in both.
_shared_codes = sorted(set(ANNOTATIONS.codes) & set(EMPHASIZERS.codes))
if _shared_codes:
    raise ValueError(
        f"Annotation and emphasizer catalogs share codes: {', '.join(_shared_codes)}"
    )

AnnotationCode = ANNOTATIONS.build_code_enum("AnnotationCode", module=__name__)
EmphasizerCode = EMPHASIZERS.build_code_enum("EmphasizerCode", module=__name__)

logger.debug(
    "Nomenclature %s loaded: %d annotations, %d emphasizers",
    VERSION,
    len(ANNOTATIONS),
    len(EMPHASIZERS),
)


# ---------------------------------------------------------------------------
# Annotations
# ---------------------------------------------------------------------------


def get_entry(code: str) -> Entry | None:
    """Annotation for a code, e.g. ``get_entry("!").name == "Surprising"``."""
    return ANNOTATIONS.get_by_code(code)


def get_entry_by_name(name: str) -> Entry | None:
    return ANNOTATIONS.get_by_name(name)


def list_all_entries() -> tuple[Entry, ...]:
    """All annotations in catalog order. Always the same tuple object."""
    return ANNOTATIONS.list_all()


def is_valid_code(value: str) -> bool:
    return ANNOTATIONS.is_valid_code(value)


# ---------------------------------------------------------------------------
# Emphasizers
# ---------------------------------------------------------------------------


def get_emphasizer(code: str) -> Entry | None:
    return EMPHASIZERS.get_by_code(code)


def get_emphasizer_by_name(name: str) -> Entry | None:
    return EMPHASIZERS.get_by_name(name)


def list_all_emphasizers() -> tuple[Entry, ...]:
    return EMPHASIZERS.list_all()


def is_valid_emphasizer_code(value: str) -> bool:
    """True for "+", "-" and "*". At most one may be attached to an annotation."""
    return EMPHASIZERS.is_valid_code(value)
