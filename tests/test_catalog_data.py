"""Tests for the static catalog rows and descriptive constants."""

import re

import pytest

from curtiss_annotation_nomenclature.catalog_data import (
    ANNOTATION_ENTRIES,
    DISCLAIMER,
    EMPHASIZER_ENTRIES,
    EMPHASIZER_GUIDANCE,
    VERSION,
)

CATALOGS = {
    "annotation": ANNOTATION_ENTRIES,
    "emphasizer": EMPHASIZER_ENTRIES,
}


class TestRowShape:
    """Every row has trimmed, non-empty fields."""

    @pytest.mark.parametrize("label", sorted(CATALOGS))
    def test_fields_are_trimmed_and_non_empty(self, label):
        for entry in CATALOGS[label]:
            for value in (entry.code, entry.name, entry.description):
                assert value
                assert value == value.strip()

    def test_annotation_count(self):
        assert len(ANNOTATION_ENTRIES) == 100

    def test_emphasizer_codes(self):
        assert [e.code for e in EMPHASIZER_ENTRIES] == ["+", "-", "*"]

    def test_names_are_identifiers(self):
        # Names double as generated enum member names.
        for entry in ANNOTATION_ENTRIES + EMPHASIZER_ENTRIES:
            assert entry.name.isidentifier()
            assert not entry.name.startswith("_")


class TestUniqueness:
    """Codes and names are unique per catalog, and code spaces are disjoint."""

    @pytest.mark.parametrize("label", sorted(CATALOGS))
    def test_codes_unique(self, label):
        codes = [e.code for e in CATALOGS[label]]
        assert len(set(codes)) == len(codes)

    @pytest.mark.parametrize("label", sorted(CATALOGS))
    def test_names_unique(self, label):
        names = [e.name for e in CATALOGS[label]]
        assert len(set(names)) == len(names)

    def test_code_spaces_disjoint(self):
        annotation_codes = {e.code for e in ANNOTATION_ENTRIES}
        emphasizer_codes = {e.code for e in EMPHASIZER_ENTRIES}
        assert annotation_codes.isdisjoint(emphasizer_codes)


class TestKnownRows:
    """Spot checks against well-known codes."""

    def test_first_and_last(self):
        assert ANNOTATION_ENTRIES[0].code == "!"
        assert ANNOTATION_ENTRIES[0].name == "Surprising"
        assert ANNOTATION_ENTRIES[-1].code == "X"
        assert ANNOTATION_ENTRIES[-1].name == "Disagree"

    def test_key_concept(self):
        by_code = {e.code: e for e in ANNOTATION_ENTRIES}
        assert by_code["KC"].name == "KeyConcept"
        assert by_code["FL"].name == "FlawInReasoning"
        assert by_code["Q"].name == "QuoteWorthy"


class TestConstants:
    """Version and descriptive text."""

    def test_version_is_semver(self):
        assert re.fullmatch(r"\d+\.\d+\.\d+", VERSION)

    def test_disclaimer(self):
        assert DISCLAIMER.short == "Noteworthy, not necessarily good or bad"
        assert DISCLAIMER.full.startswith("These annotations are for indicating 'noteworthy' content")

    def test_guidance_mentions_single_emphasizer(self):
        assert "one CAN Emphasizer per CAN Code" in EMPHASIZER_GUIDANCE.recommendation
        assert EMPHASIZER_GUIDANCE.purpose
        assert EMPHASIZER_GUIDANCE.note
