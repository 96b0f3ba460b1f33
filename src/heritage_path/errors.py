"""Errors raised while loading a relationship dataset or answering a path query."""


class HeritageError(Exception):
    """Base class for every error the pipeline reports to its caller."""


class RecordError(HeritageError):
    """A single dataset line could not be turned into a record."""

    def __init__(self, line_no: int, message: str):
        super().__init__(f"Line {line_no}: {message}")
        self.line_no = line_no


class MalformedRecord(RecordError):
    pass


class MissingField(RecordError):
    def __init__(self, line_no: int, field: str):
        super().__init__(line_no, f"required field {field!r} is empty")
        self.field = field


class InvalidMetadata(RecordError):
    def __init__(self, line_no: int, field: str, value: str):
        super().__init__(line_no, f"{field!r} must be a non-negative integer (got {value!r})")
        self.field = field
        self.value = value


class ConflictingPersonData(HeritageError):
    def __init__(self, person_id: str, attribute: str, existing, new, line_no: int):
        super().__init__(
            f"Line {line_no}: person {person_id} has {attribute} {new!r}, "
            f"but an earlier record gave {existing!r}"
        )
        self.person_id = person_id
        self.attribute = attribute
        self.existing = existing
        self.new = new
        self.line_no = line_no


class UnknownIdentifier(HeritageError):
    def __init__(self, person_id: str, role: str):
        super().__init__(f"Unknown {role} id: {person_id}")
        self.person_id = person_id
        self.role = role


class NoPathFound(HeritageError):
    def __init__(self, from_id: str, to_id: str):
        super().__init__(f"No direct or indirect relationship found between {from_id} and {to_id}")
        self.from_id = from_id
        self.to_id = to_id
