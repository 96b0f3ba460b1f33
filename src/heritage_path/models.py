"""Data classes for people, relationship records and ancestry paths."""

from dataclasses import dataclass

UNKNOWN_NAME = "Unknown"


@dataclass(frozen=True)
class PersonRecord:
    """What a single dataset row states about one person."""

    person_id: str
    name: str | None
    age: int | None
    line_no: int


@dataclass(frozen=True)
class RelationshipRecord:
    source: PersonRecord
    target: PersonRecord
    kind: str  # Father, Mother, Spouse, or any label the dataset defines
    line_no: int


@dataclass(frozen=True)
class Person:
    id: str
    name: str | None = None
    age: int | None = None

    @property
    def display_name(self) -> str:
        return self.name or UNKNOWN_NAME


@dataclass(frozen=True)
class PathStep:
    person: Person
    kind: str | None  # None on the final step


@dataclass(frozen=True)
class AncestryPath:
    steps: tuple[PathStep, ...]

    @property
    def hops(self) -> int:
        return len(self.steps) - 1

    @property
    def person_ids(self) -> list[str]:
        return [step.person.id for step in self.steps]
