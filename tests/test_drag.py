import pytest

from tripglobe.editor.drag import ReorderSwapEngine
from tripglobe.editor.grouping import group_stops_by_day
from tripglobe.models.itinerary import Stop


@pytest.fixture
def stops():
    return [
        Stop(id="1", date="2024-12-22", title="Cu Chi Tunnel"),
        Stop(id="2", date="2024-12-22", title="Cao Dai Temple"),
        Stop(id="3", date="2024-12-23", title="War Remnants Museum"),
    ]


def buckets(stops):
    return [(key, [s.id for s in day]) for key, day in group_stops_by_day(stops)]


def by_id(stops):
    return {s.id: s for s in stops}


def test_swap_across_days(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 0, "1")
    result = engine.drop(stops, "2024-12-23", 0, "3")

    assert buckets(result) == [("2024-12-22", ["3", "2"]), ("2024-12-23", ["1"])]
    assert by_id(result)["1"].date == "2024-12-23"
    assert by_id(result)["3"].date == "2024-12-22"
    assert not engine.is_dragging


def test_swap_does_not_mutate_input(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 0, "1")
    engine.drop(stops, "2024-12-23", 0, "3")
    assert [s.date for s in stops] == ["2024-12-22", "2024-12-22", "2024-12-23"]


def test_swap_within_day(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 1, "2")
    result = engine.drop(stops, "2024-12-22", 0, "1")
    assert buckets(result) == [("2024-12-22", ["2", "1"]), ("2024-12-23", ["3"])]
    # same-day swap keeps the original objects
    assert by_id(result)["1"] is stops[0]


def test_swap_touches_only_the_two_stops():
    stops = [Stop(id=str(i), date=f"2024-12-2{i % 3}") for i in range(9)]
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-21", 0, "1")
    result = engine.drop(stops, "2024-12-22", 1, "5")

    assert len(result) == len(stops)
    assert sorted(s.id for s in result) == sorted(s.id for s in stops)
    changed = [b.id for a, b in zip(stops, result) if a is not b]
    assert sorted(changed) == ["1", "5"]


def test_self_drop_is_a_no_op(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 0, "1")
    result = engine.drop(stops, "2024-12-22", 0, "1")
    assert result == stops
    assert all(a is b for a, b in zip(result, stops))
    assert not engine.is_dragging


def test_drop_without_drag_returns_list_unchanged(stops):
    engine = ReorderSwapEngine()
    assert engine.drop(stops, "2024-12-23", 0, "3") == stops


def test_cancel_discards_drag(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 0, "1")
    engine.end_drag()
    assert engine.drag_state is None
    assert engine.drop(stops, "2024-12-23", 0, "3") == stops


def test_second_begin_overwrites_first(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 0, "1")
    engine.begin_drag("2024-12-22", 1, "2")
    assert engine.drag_state.stop_id == "2"
    result = engine.drop(stops, "2024-12-23", 0, "3")
    assert buckets(result) == [("2024-12-22", ["1", "3"]), ("2024-12-23", ["2"])]


def test_drop_on_end_of_other_day_moves_stop(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 0, "1")
    result = engine.drop(stops, "2024-12-23", 1)
    assert buckets(result) == [("2024-12-22", ["2"]), ("2024-12-23", ["3", "1"])]
    assert by_id(result)["1"].date == "2024-12-23"


def test_drop_on_empty_day_moves_stop(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-23", 0, "3")
    result = engine.drop(stops, "2024-12-24", 0)
    assert buckets(result) == [("2024-12-22", ["1", "2"]), ("2024-12-24", ["3"])]


def test_drop_zone_within_same_day_accounts_for_removed_slot():
    stops = [Stop(id=c, date="2024-12-22") for c in "abcd"]
    engine = ReorderSwapEngine()
    # zone 3 sits between "c" and "d"
    engine.begin_drag("2024-12-22", 0, "a")
    result = engine.drop(stops, "2024-12-22", 3)
    assert [s.id for s in result] == ["b", "c", "a", "d"]

    engine.begin_drag("2024-12-22", 3, "d")
    result = engine.drop(stops, "2024-12-22", 0)
    assert [s.id for s in result] == ["d", "a", "b", "c"]


def test_missing_source_is_ignored(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-25", 4, "gone")
    assert engine.drop(stops, "2024-12-22", 0, "1") == stops


def test_stale_target_id_moves_instead_of_swapping(stops):
    engine = ReorderSwapEngine()
    engine.begin_drag("2024-12-22", 0, "1")
    result = engine.drop(stops, "2024-12-23", 0, "deleted-elsewhere")

    assert buckets(result) == [("2024-12-22", ["2"]), ("2024-12-23", ["1", "3"])]
    assert by_id(result)["3"] is stops[2]
