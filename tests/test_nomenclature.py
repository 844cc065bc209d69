"""Tests for the public annotation and emphasizer lookup surface."""

from dataclasses import FrozenInstanceError

import pytest

from curtiss_annotation_nomenclature import nomenclature
from curtiss_annotation_nomenclature.nomenclature import (
    ANNOTATIONS,
    EMPHASIZERS,
    AnnotationCode,
    EmphasizerCode,
    get_emphasizer,
    get_emphasizer_by_name,
    get_entry,
    get_entry_by_name,
    is_valid_code,
    is_valid_emphasizer_code,
    list_all_emphasizers,
    list_all_entries,
)


class TestAnnotationLookup:
    """Lookup by code and by name."""

    def test_get_entry(self):
        entry = get_entry("!")
        assert entry.code == "!"
        assert entry.name == "Surprising"
        assert entry.description == "Surprising or unexpected"

    def test_get_entry_by_name(self):
        entry = get_entry_by_name("KeyConcept")
        assert entry.code == "KC"

    def test_unknown_code_returns_none(self):
        assert get_entry("ZZ") is None
        assert get_entry("") is None

    def test_unknown_name_returns_none(self):
        assert get_entry_by_name("NotAName") is None

    def test_lookup_is_case_sensitive(self):
        assert get_entry("kc") is None
        assert get_entry_by_name("keyconcept") is None

    def test_non_string_keys_return_none(self):
        assert get_entry(None) is None
        assert get_entry(42) is None
        assert get_entry_by_name(None) is None

    def test_bijection(self):
        for entry in list_all_entries():
            assert get_entry(entry.code).code == entry.code
            assert get_entry_by_name(entry.name).name == entry.name
            assert ANNOTATIONS.name_to_code[entry.name] == entry.code
            assert ANNOTATIONS.code_to_name[entry.code] == entry.name
            assert ANNOTATIONS.code_to_description[entry.code] == entry.description


class TestValidation:
    """is_valid_code and is_valid_emphasizer_code."""

    def test_valid_codes(self):
        assert is_valid_code("KC")
        assert is_valid_code("!")
        assert is_valid_code("?")

    def test_invalid_codes(self):
        assert not is_valid_code("")
        assert not is_valid_code("kc")
        assert not is_valid_code("KC ")
        assert not is_valid_code("INVALID")
        assert not is_valid_code(None)

    def test_emphasizer_is_not_an_annotation(self):
        assert not is_valid_code("*")
        assert is_valid_emphasizer_code("*")

    def test_annotation_is_not_an_emphasizer(self):
        assert not is_valid_emphasizer_code("KC")
        assert not is_valid_emphasizer_code("")
        assert not is_valid_emphasizer_code("*+")

    def test_validators_accept_enum_members(self):
        assert is_valid_code(AnnotationCode.KeyConcept)
        assert is_valid_emphasizer_code(EmphasizerCode.Critical)


class TestEmphasizers:
    """The three emphasizers and their accessors."""

    def test_get_emphasizer(self):
        assert get_emphasizer("+").name == "StrongLike"
        assert get_emphasizer("-").name == "StrongDislike"
        assert get_emphasizer("*").name == "Critical"

    def test_get_emphasizer_by_name(self):
        assert get_emphasizer_by_name("Critical").code == "*"
        assert get_emphasizer_by_name("critical") is None

    def test_list_all_emphasizers(self):
        assert [e.code for e in list_all_emphasizers()] == ["+", "-", "*"]

    def test_unknown_emphasizer(self):
        assert get_emphasizer("!") is None


class TestCatalogInvariants:
    """Uniqueness, disjointness and order across the public surface."""

    def test_codes_and_names_unique(self):
        for catalog in (ANNOTATIONS, EMPHASIZERS):
            entries = catalog.list_all()
            assert len({e.code for e in entries}) == len(entries)
            assert len({e.name for e in entries}) == len(entries)

    def test_disjoint_code_spaces(self):
        assert set(ANNOTATIONS.codes).isdisjoint(EMPHASIZERS.codes)

    def test_order_preserved(self):
        entries = list_all_entries()
        assert len(entries) == len(ANNOTATIONS.codes) == 100
        for i, code in enumerate(ANNOTATIONS.codes):
            assert entries[i].code == code


class TestReferentialStability:
    """Repeated calls return the identical object, not a copy."""

    def test_list_all_entries_identity(self):
        assert list_all_entries() is list_all_entries()

    def test_list_all_emphasizers_identity(self):
        assert list_all_emphasizers() is list_all_emphasizers()

    def test_projection_identity(self):
        assert ANNOTATIONS.codes is ANNOTATIONS.codes
        assert ANNOTATIONS.name_to_code is ANNOTATIONS.name_to_code
        assert ANNOTATIONS.code_to_description is ANNOTATIONS.code_to_description

    def test_lookup_returns_same_entry(self):
        assert get_entry("KC") is get_entry("KC")
        assert get_entry("KC") is get_entry_by_name("KeyConcept")


class TestImmutability:
    """Write attempts fail and leave subsequent reads unchanged."""

    def test_entry_is_frozen(self):
        entry = get_entry("KC")
        with pytest.raises(FrozenInstanceError):
            entry.name = "Changed"
        assert get_entry("KC").name == "KeyConcept"

    def test_list_is_immutable(self):
        entries = list_all_entries()
        with pytest.raises(TypeError):
            entries[0] = entries[1]
        with pytest.raises(AttributeError):
            entries.append(entries[0])
        assert list_all_entries()[0].code == "!"

    def test_maps_are_immutable(self):
        with pytest.raises(TypeError):
            ANNOTATIONS.code_to_name["KC"] = "Changed"
        with pytest.raises(TypeError):
            del ANNOTATIONS.name_to_code["KeyConcept"]
        assert ANNOTATIONS.code_to_name["KC"] == "KeyConcept"

    def test_projections_cannot_be_replaced(self):
        with pytest.raises(AttributeError):
            ANNOTATIONS.codes = ()
        assert len(ANNOTATIONS.codes) == 100

    def test_copy_of_list_does_not_affect_catalog(self):
        copied = list(list_all_entries())
        copied.clear()
        assert len(list_all_entries()) == 100


class TestGeneratedEnums:
    """Enums generated from the catalog rows."""

    def test_annotation_enum_values(self):
        assert AnnotationCode.KeyConcept == "KC"
        assert AnnotationCode.Surprising.value == "!"
        assert AnnotationCode("FL") is AnnotationCode.FlawInReasoning

    def test_annotation_enum_covers_catalog(self):
        assert [member.value for member in AnnotationCode] == list(ANNOTATIONS.codes)

    def test_emphasizer_enum(self):
        assert EmphasizerCode.StrongLike == "+"
        assert EmphasizerCode.StrongDislike == "-"
        assert EmphasizerCode.Critical == "*"
        assert len(EmphasizerCode) == 3

    def test_enum_member_lookup(self):
        assert get_entry(AnnotationCode.QuoteWorthy).code == "Q"
        assert get_emphasizer(EmphasizerCode.Critical).name == "Critical"


class TestConstants:
    """Re-exported constants."""

    def test_version(self):
        assert nomenclature.VERSION == "1.0.0"

    def test_disclaimer_and_guidance(self):
        assert nomenclature.DISCLAIMER.short
        assert nomenclature.EMPHASIZER_GUIDANCE.recommendation
