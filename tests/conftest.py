"""Shared fixtures for the heritage-path test suite."""
import pytest

from heritage_path.config import make_layout, PERSONS
from heritage_path.graph import build_graph
from heritage_path.parsing import iter_records


# ── CSV constants ──

FATHER_LINE_CSV = """\
source_id,source_name,age,kind,target_id,target_name
20,Name A,,Father,6,
6,Name B,,Father,1,Name C
"""

# Two equally short routes from 1 to 9: via 3 and via 2
DIAMOND_CSV = """\
source_id,source_name,age,kind,target_id
1,Root,,Father,3
1,Root,,Father,2
3,Left,,Mother,9
2,Right,,Father,9
9,Leaf,,Father,10
"""

PERSONS_CSV = """\
PersonID;SpouseID;FatherID;MotherID;Person
1;;2;3;Child
2;3;;;Dad
3;;4;;Mom
4;;;;Grandpa
"""


def lines(text: str) -> list[bytes]:
    return text.encode("utf-8").splitlines(keepends=True)


def graph_from(text: str, layout=None):
    layout = layout or make_layout()
    return build_graph(iter_records(lines(text), layout))


@pytest.fixture
def father_line():
    return graph_from(FATHER_LINE_CSV)


@pytest.fixture
def diamond():
    return graph_from(DIAMOND_CSV)


@pytest.fixture
def persons_graph():
    return graph_from(PERSONS_CSV, make_layout(PERSONS, ";"))


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "family.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
