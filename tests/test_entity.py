from geosketch.entity import Arena, CircleId, LineId, PointId


def test_arena_issues_sequential_ids():
    arena = Arena(PointId)
    first = arena.insert_with(lambda ident: f"value-{ident.index}")
    second = arena.insert_with(lambda ident: f"value-{ident.index}")

    assert first == PointId(0, 0)
    assert second == PointId(1, 0)
    assert arena.get(first) == "value-0"
    assert arena.get(second) == "value-1"
    assert len(arena) == 2


def test_removed_slot_is_reused_with_new_generation():
    arena = Arena(PointId)
    stale = arena.insert_with(lambda ident: "old")
    assert arena.remove(stale) == "old"
    assert len(arena) == 0

    fresh = arena.insert_with(lambda ident: "new")

    assert fresh.index == stale.index
    assert fresh.generation == stale.generation + 1
    assert arena.get(stale) is None
    assert stale not in arena
    assert arena.get(fresh) == "new"


def test_remove_unknown_id_is_noop():
    arena = Arena(LineId)
    arena.insert_with(lambda ident: "line")

    assert arena.remove(LineId(5, 0)) is None
    assert arena.remove(LineId(0, 3)) is None
    assert len(arena) == 1


def test_ids_of_other_kinds_do_not_resolve():
    arena = Arena(PointId)
    arena.insert_with(lambda ident: "point")

    assert arena.get(LineId(0, 0)) is None
    assert arena.get(CircleId(0, 0)) is None
    assert LineId(0, 0) not in arena
    assert PointId(0, 0) != LineId(0, 0)


def test_items_skip_removed_slots():
    arena = Arena(CircleId)
    ids = [arena.insert_with(lambda ident: ident.index * 10) for _ in range(3)]
    arena.remove(ids[1])

    assert list(arena.items()) == [(CircleId(0, 0), 0), (CircleId(2, 0), 20)]
    assert list(arena) == list(arena.items())


def test_entity_id_rendering():
    ident = PointId(3, 1)
    assert ident.key == "3_1"
    assert str(ident) == "PointId(3, 1)"
    assert str(LineId(0)) == "LineId(0, 0)"
    assert hash(PointId(3, 1)) == hash(ident)
