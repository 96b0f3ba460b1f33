"""Relationship dataset parsing: raw lines in, typed records out."""

import csv
import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .config import PERSONS, DatasetLayout
from .errors import InvalidMetadata, MalformedRecord, MissingField
from .models import PersonRecord, RelationshipRecord

logger = logging.getLogger(__name__)

Record = PersonRecord | RelationshipRecord

AGE_PATTERN = re.compile(r"\d+", re.ASCII)

# Reference column -> relationship kind, for the one-row-per-person layout
RELATIVE_KINDS = (
    ("father_id", "Father"),
    ("mother_id", "Mother"),
    ("spouse_id", "Spouse"),
)


def decode_line(raw: bytes | str, line_no: int) -> str:
    """Decode one physical line as strict UTF-8 and drop the line terminator."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedRecord(line_no, f"invalid UTF-8 at byte {exc.start}") from exc
    if line_no == 1:
        raw = raw.removeprefix("\ufeff")
    return raw.rstrip("\r\n")


def split_line(text: str, delimiter: str, line_no: int) -> list[str]:
    try:
        return next(csv.reader([text], delimiter=delimiter, strict=True))
    except csv.Error as exc:
        raise MalformedRecord(line_no, str(exc)) from exc


def read_header(fields: list[str], layout: DatasetLayout, line_no: int) -> dict[str, int]:
    """Map each logical field of the layout to its column index in the header."""
    names = [name.strip() for name in fields]
    indices: dict[str, int] = {}
    for logical, header_name in layout.columns.items():
        if header_name in names:
            indices[logical] = names.index(header_name)

    missing = [layout.columns[f] for f in layout.required if f not in indices]
    if missing:
        raise MalformedRecord(line_no, f"header is missing column(s): {', '.join(missing)}")
    return indices


def _required(values: dict[str, str], field: str, line_no: int) -> str:
    value = values.get(field, "")
    if not value:
        raise MissingField(line_no, field)
    return value


def _age(values: dict[str, str], field: str, line_no: int) -> int | None:
    value = values.get(field, "")
    if not value:
        return None
    if not AGE_PATTERN.fullmatch(value):
        raise InvalidMetadata(line_no, field, value)
    return int(value)


def _relationship_row(values: dict[str, str], line_no: int) -> Iterator[Record]:
    source_id = _required(values, "source_id", line_no)
    source_name = _required(values, "source_name", line_no)
    kind = _required(values, "kind", line_no)
    target_id = _required(values, "target_id", line_no)
    if source_id == target_id:
        raise MalformedRecord(line_no, f"person {source_id} cannot be related to themselves")

    source = PersonRecord(source_id, source_name, _age(values, "age", line_no), line_no)
    target = PersonRecord(
        target_id,
        values.get("target_name") or None,
        _age(values, "target_age", line_no),
        line_no,
    )
    yield RelationshipRecord(source=source, target=target, kind=kind, line_no=line_no)


def _person_row(values: dict[str, str], line_no: int) -> Iterator[Record]:
    person_id = _required(values, "person_id", line_no)
    person = PersonRecord(
        person_id,
        _required(values, "name", line_no),
        _age(values, "age", line_no),
        line_no,
    )
    yield person

    # Edges point from the relative (ancestor side) toward the row's person
    for field, kind in RELATIVE_KINDS:
        relative_id = values.get(field)
        if not relative_id:
            continue
        if relative_id == person_id:
            raise MalformedRecord(line_no, f"person {person_id} is listed as their own {kind}")
        relative = PersonRecord(relative_id, None, None, line_no)
        yield RelationshipRecord(source=relative, target=person, kind=kind, line_no=line_no)


def iter_records(lines: Iterable[bytes | str], layout: DatasetLayout) -> Iterator[Record]:
    """
    Turn dataset lines into records, in file order.

    The first non-blank line is the header. Raises a RecordError subclass on
    the first line that cannot be parsed; nothing after it is produced.
    """
    row_parser = _person_row if layout.name == PERSONS else _relationship_row
    indices: dict[str, int] | None = None
    width = 0
    rows = 0

    for line_no, raw in enumerate(lines, start=1):
        text = decode_line(raw, line_no)
        if not text.strip():
            continue

        fields = split_line(text, layout.delimiter, line_no)
        if indices is None:
            indices = read_header(fields, layout, line_no)
            width = len(fields)
            continue

        if len(fields) != width:
            raise MalformedRecord(line_no, f"expected {width} fields, found {len(fields)}")

        values = {logical: fields[i].strip() for logical, i in indices.items()}
        rows += 1
        yield from row_parser(values, line_no)

    logger.debug("Parsed %d data rows", rows)


def read_records(path: str | Path, layout: DatasetLayout) -> Iterator[Record]:
    """Stream records from a dataset file on disk."""
    path = Path(path)
    logger.info("Reading %s (%s layout)", path, layout.name)
    with path.open("rb") as f:
        yield from iter_records(f, layout)
