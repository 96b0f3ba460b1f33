"""Tests for heritage_path/config.py."""
import pytest

from heritage_path.config import (
    DELIMITER_ENV_VAR,
    LAYOUT_ENV_VAR,
    PERSONS,
    RELATIONSHIPS,
    layout_from_env,
    make_layout,
    parse_column_overrides,
)


class TestMakeLayout:
    def test_defaults(self):
        layout = make_layout()
        assert layout.name == RELATIONSHIPS
        assert layout.delimiter == ","
        assert layout.required == ("source_id", "source_name", "kind", "target_id")

    def test_persons(self):
        layout = make_layout(PERSONS, ";")
        assert layout.columns["person_id"] == "PersonID"
        assert layout.required == ("person_id", "name")

    def test_unknown_layout(self):
        with pytest.raises(ValueError):
            make_layout("gedcom")

    def test_bad_delimiter(self):
        with pytest.raises(ValueError):
            make_layout(delimiter=";;")

    def test_layouts_do_not_share_columns(self):
        a = make_layout()
        a.columns["kind"] = "changed"
        assert make_layout().columns["kind"] == "kind"


class TestColumnOverrides:
    def test_parse(self):
        assert parse_column_overrides(["kind=Beziehung", " source_id = Von "]) == {
            "kind": "Beziehung",
            "source_id": "Von",
        }

    @pytest.mark.parametrize("pair", ["kind", "=x", "kind="])
    def test_parse_invalid(self, pair):
        with pytest.raises(ValueError):
            parse_column_overrides([pair])

    def test_with_columns(self):
        layout = make_layout().with_columns({"kind": "Beziehung"})
        assert layout.columns["kind"] == "Beziehung"
        assert layout.columns["source_id"] == "source_id"

    def test_with_unknown_field(self):
        with pytest.raises(ValueError, match="father_id"):
            make_layout().with_columns({"father_id": "Vater"})


class TestLayoutFromEnv:
    def test_no_env(self):
        assert layout_from_env({}) == make_layout()

    def test_env_overrides(self):
        layout = layout_from_env({LAYOUT_ENV_VAR: PERSONS, DELIMITER_ENV_VAR: ";"})
        assert layout.name == PERSONS
        assert layout.delimiter == ";"


class TestDefaultDelimiters:
    def test_relationships_use_comma(self):
        assert make_layout(RELATIONSHIPS).delimiter == ","

    def test_persons_use_semicolon(self):
        assert make_layout(PERSONS).delimiter == ";"

    def test_explicit_delimiter_wins(self):
        assert make_layout(PERSONS, ",").delimiter == ","

    def test_env_layout_without_delimiter(self):
        assert layout_from_env({LAYOUT_ENV_VAR: PERSONS}).delimiter == ";"

    def test_env_delimiter_only(self):
        layout = layout_from_env({DELIMITER_ENV_VAR: "\t"})
        assert layout.name == RELATIONSHIPS
        assert layout.delimiter == "\t"
