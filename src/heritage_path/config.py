"""Dataset layout configuration: which columns hold which fields."""

import logging
import os
from dataclasses import dataclass, field, replace

logger = logging.getLogger(__name__)

LAYOUT_ENV_VAR = "HERITAGE_PATH_LAYOUT"
DELIMITER_ENV_VAR = "HERITAGE_PATH_DELIMITER"

RELATIONSHIPS = "relationships"
PERSONS = "persons"

# Logical field -> default header name, per layout
DEFAULT_COLUMNS = {
    RELATIONSHIPS: {
        "source_id": "source_id",
        "source_name": "source_name",
        "age": "age",
        "kind": "kind",
        "target_id": "target_id",
        "target_name": "target_name",
        "target_age": "target_age",
    },
    PERSONS: {
        "person_id": "PersonID",
        "name": "Person",
        "age": "Age",
        "father_id": "FatherID",
        "mother_id": "MotherID",
        "spouse_id": "SpouseID",
    },
}

# Fields whose column must be present in the header
REQUIRED_COLUMNS = {
    RELATIONSHIPS: ("source_id", "source_name", "kind", "target_id"),
    PERSONS: ("person_id", "name"),
}

LAYOUTS = tuple(DEFAULT_COLUMNS)

# The one-row-per-person export is semicolon separated
DEFAULT_DELIMITERS = {
    RELATIONSHIPS: ",",
    PERSONS: ";",
}


@dataclass(frozen=True)
class DatasetLayout:
    """How to read one relationship dataset.

    Args:
        name: Either ``relationships`` (one row per relationship) or
            ``persons`` (one row per person with father/mother/spouse id columns).
        delimiter: Single-character field separator.
        columns: Mapping of logical field name to header column name.
    """

    name: str = RELATIONSHIPS
    delimiter: str = ","
    columns: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLUMNS[RELATIONSHIPS]))

    @property
    def required(self) -> tuple[str, ...]:
        return REQUIRED_COLUMNS[self.name]

    def with_columns(self, overrides: dict[str, str]) -> "DatasetLayout":
        """Return a copy with some logical fields mapped to different header names."""
        unknown = sorted(set(overrides) - set(self.columns))
        if unknown:
            raise ValueError(
                f"Unknown column field(s) for layout {self.name!r}: {', '.join(unknown)}"
            )
        return replace(self, columns={**self.columns, **overrides})


def make_layout(name: str = RELATIONSHIPS, delimiter: str | None = None) -> DatasetLayout:
    """Layout with default columns; the delimiter defaults per layout."""
    if name not in DEFAULT_COLUMNS:
        raise ValueError(f"Unknown layout {name!r}; expected one of {', '.join(LAYOUTS)}")
    if delimiter is None:
        delimiter = DEFAULT_DELIMITERS[name]
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character (got {delimiter!r})")
    return DatasetLayout(name=name, delimiter=delimiter, columns=dict(DEFAULT_COLUMNS[name]))


def env_settings(environ=None) -> tuple[str | None, str | None]:
    """Layout name and delimiter set in the environment, or None where unset."""
    environ = os.environ if environ is None else environ
    name = environ.get(LAYOUT_ENV_VAR)
    delimiter = environ.get(DELIMITER_ENV_VAR)
    if name is not None or delimiter is not None:
        logger.debug("Layout from environment: %s, delimiter %r", name, delimiter)
    return name, delimiter


def layout_from_env(environ=None) -> DatasetLayout:
    """Build the default layout, honouring environment overrides."""
    name, delimiter = env_settings(environ)
    return make_layout(name or RELATIONSHIPS, delimiter)


def parse_column_overrides(pairs: list[str]) -> dict[str, str]:
    """Parse ``FIELD=HEADER`` strings as given on the command line."""
    overrides: dict[str, str] = {}
    for pair in pairs:
        logical, sep, header = pair.partition("=")
        if not sep or not logical.strip() or not header.strip():
            raise ValueError(f"Column mapping must look like FIELD=HEADER (got {pair!r})")
        overrides[logical.strip()] = header.strip()
    return overrides
