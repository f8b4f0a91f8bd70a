from bezierpad.core import ControlPoint, ControlPointStore


def _store(*positions) -> ControlPointStore:
    store = ControlPointStore()
    for p in positions:
        store.insert_at_end(p)
    return store


def test_ids_are_monotonic_and_never_reused() -> None:
    store = ControlPointStore()
    a = store.insert_at_end((0.0, 0.0))
    b = store.insert_at_end((1.0, 1.0))
    assert (a, b) == (0, 1)
    assert store.remove(b)
    c = store.insert_at_end((2.0, 2.0))
    assert c == 2
    store.clear()
    assert store.insert_at_end((3.0, 3.0)) == 3


def test_remove_keeps_order_and_surviving_ids() -> None:
    store = _store((0, 0), (10, 0), (20, 0), (30, 0))
    assert store.remove(1)
    assert store.ids() == (0, 2, 3)
    assert store.ordered_positions() == ((0.0, 0.0), (20.0, 0.0), (30.0, 0.0))
    assert store.index_of(2) == 1
    assert store.index_of(1) is None


def test_unknown_id_is_a_noop() -> None:
    store = _store((0, 0))
    assert not store.remove(42)
    assert not store.update_position(42, (5.0, 5.0))
    assert store.ordered_positions() == ((0.0, 0.0),)


def test_update_position_keeps_slot() -> None:
    store = _store((0, 0), (10, 0), (20, 0))
    assert store.update_position(0, (99.0, 99.0))
    assert store.ordered_positions()[0] == (99.0, 99.0)
    assert store.ids() == (0, 1, 2)


def test_insert_then_remove_restores_positions() -> None:
    store = _store((1, 2), (3, 4), (5, 6))
    before = store.ordered_positions()
    pid = store.insert_at_end((7.0, 8.0))
    store.remove(pid)
    assert store.ordered_positions() == before


def test_find_nearest_excludes_exact_threshold() -> None:
    store = _store((0, 0))
    # (3, 4) is exactly 5 away
    assert store.find_nearest((3.0, 4.0), 5.0) is None
    assert store.find_nearest((3.0, 3.99), 5.0) == 0


def test_find_nearest_picks_minimum_distance() -> None:
    store = _store((0, 0), (10, 0), (12, 0))
    assert store.find_nearest((11.5, 0.0), 5.0) == 2
    assert store.find_nearest((100.0, 100.0), 5.0) is None


def test_find_nearest_tie_goes_to_earliest_insert() -> None:
    store = _store((2, 0), (0, 0))
    assert store.find_nearest((1.0, 0.0), 5.0) == 0


def test_find_nearest_on_empty_store() -> None:
    assert ControlPointStore().find_nearest((0.0, 0.0), 10.0) is None


def test_iteration_and_membership() -> None:
    store = _store((1, 1), (2, 2))
    assert list(store) == [ControlPoint(0, (1.0, 1.0)), ControlPoint(1, (2.0, 2.0))]
    assert 1 in store
    assert 5 not in store
    assert len(store) == 2
    assert store.position_of(1) == (2.0, 2.0)
    assert store.position_of(5) is None


def test_capacity() -> None:
    store = ControlPointStore(capacity=2)
    store.insert_at_end((0, 0))
    assert not store.is_full
    store.insert_at_end((1, 1))
    assert store.is_full
    assert not ControlPointStore().is_full
