"""Unit tests for coverage matrices."""

import pytest

from golden.contexts.content import ContentRecord, Location, MatchContext, Persona
from golden.contexts.targeting import build_coverage_matrix, persona_days_matrix, persona_location_matrix
from golden.contexts.targeting.coverage import STATUS_COVERED, STATUS_MISSING, STATUS_THIN


@pytest.fixture
def phrases():
    return [
        ContentRecord(id="p1", text="a", persona="parent", location="park", gender="female"),
        ContentRecord(id="p2", text="b", persona="parent", location="park"),
        ContentRecord(id="s1", text="c", persona="student", location="home", gender="male"),
    ]


@pytest.mark.unit
def test_cell_counts(phrases):
    matrix = persona_location_matrix(
        phrases,
        personas=[Persona.PARENT, Persona.STUDENT],
        locations=[Location.PARK, Location.HOME],
    )

    assert matrix.cell(Persona.PARENT, Location.PARK).count == 2
    assert matrix.cell(Persona.PARENT, Location.HOME).count == 0
    assert matrix.cell(Persona.STUDENT, Location.HOME).count == 1
    assert matrix.as_table() == {
        Persona.PARENT: {Location.PARK: 2, Location.HOME: 0},
        Persona.STUDENT: {Location.PARK: 0, Location.HOME: 1},
    }


@pytest.mark.unit
def test_cell_gender_breakdown(phrases):
    matrix = persona_location_matrix(phrases, personas=[Persona.PARENT], locations=[Location.PARK])
    cell = matrix.cell(Persona.PARENT, Location.PARK)

    assert (cell.male_count, cell.female_count, cell.unisex_count) == (0, 1, 1)


@pytest.mark.unit
def test_cell_status(phrases):
    matrix = persona_location_matrix(
        phrases,
        personas=[Persona.PARENT, Persona.STUDENT],
        locations=[Location.PARK, Location.HOME],
    )

    assert matrix.cell(Persona.PARENT, Location.PARK).status == STATUS_COVERED
    assert matrix.cell(Persona.STUDENT, Location.HOME).status == STATUS_THIN
    assert matrix.cell(Persona.PARENT, Location.HOME).status == STATUS_MISSING
    assert len(matrix.missing()) == 2


@pytest.mark.unit
def test_stats(phrases):
    matrix = persona_location_matrix(
        phrases,
        personas=[Persona.PARENT, Persona.STUDENT],
        locations=[Location.PARK, Location.HOME],
    )
    stats = matrix.stats()

    assert stats.total_cells == 4
    assert stats.covered_cells == 2
    assert stats.total_messages == 3
    assert stats.percentage == 50


@pytest.mark.unit
def test_base_context_filters_every_cell(phrases):
    matrix = persona_location_matrix(
        phrases,
        personas=[Persona.PARENT],
        locations=[Location.PARK],
        base_context=MatchContext(gender="male"),
    )

    assert matrix.cell(Persona.PARENT, Location.PARK).count == 1


@pytest.mark.unit
def test_wildcard_records_count_in_every_cell():
    records = [ContentRecord(id="g", text="general")]
    matrix = persona_location_matrix(records)

    assert len(matrix.cells) == len(Persona) * len(Location)
    assert all(cell.count == 1 for cell in matrix.cells)


@pytest.mark.unit
def test_persona_days_matrix():
    notifications = [
        ContentRecord(id="n1", text="a", kind="notifications", trigger_type="Inactivity", persona="parent", days_inactive=1),
        ContentRecord(id="n2", text="b", kind="notifications", trigger_type="Inactivity", persona="parent", days_inactive=7),
        ContentRecord(id="n3", text="c", kind="notifications", trigger_type="Scheduled", persona="parent"),
    ]

    matrix = persona_days_matrix(notifications, personas=[Persona.PARENT], days=[1, 3, 6, 30])

    assert matrix.as_table() == {Persona.PARENT: {1: 1, 3: 0, 6: 1, 30: 0}}


@pytest.mark.unit
def test_generic_dimensions():
    records = [
        ContentRecord(id="a", text="a", sport_type="running", gender="female"),
        ContentRecord(id="b", text="b", sport_type="yoga"),
    ]

    matrix = build_coverage_matrix(records, "sport_type", ["running", "yoga"], "gender", ["male", "female"])

    assert matrix.as_table() == {
        "running": {"male": 0, "female": 1},
        "yoga": {"male": 1, "female": 1},
    }
