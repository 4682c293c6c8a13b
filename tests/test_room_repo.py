from models.room import Room


def test_insert_then_get_by_id_returns_same_room(room_repo):
    bathroom = Room(name="Bathroom", max_occupancy=1)

    new_id = room_repo.insert(bathroom)

    assert new_id > 0
    assert bathroom.id == new_id
    assert room_repo.get_by_id(new_id) == Room(id=new_id, name="Bathroom", max_occupancy=1)


def test_get_by_id_missing_returns_none(room_repo):
    assert room_repo.get_by_id(12345) is None


def test_get_all_counts_live_rows_in_insert_order(room_repo):
    kitchen = Room(name="Kitchen", max_occupancy=3)
    attic = Room(name="Attic", max_occupancy=1)
    den = Room(name="Den", max_occupancy=2)
    for room in (kitchen, attic, den):
        room_repo.insert(room)
    room_repo.delete(attic.id)

    rooms = room_repo.get_all()

    assert [r.name for r in rooms] == ["Kitchen", "Den"]


def test_delete_makes_room_unfindable(room_repo):
    room = Room(name="Closet", max_occupancy=1)
    room_repo.insert(room)

    assert room_repo.delete(room.id) is True
    assert room_repo.get_by_id(room.id) is None


def test_delete_missing_room_is_a_noop(room_repo):
    room_repo.insert(Room(name="Porch", max_occupancy=4))

    assert room_repo.delete(999) is False
    assert len(room_repo.get_all()) == 1


def test_update_overwrites_name_and_occupancy(room_repo):
    room = Room(name="Bathroom", max_occupancy=1)
    room_repo.insert(room)
    room.name = "Bathroom2"
    room.max_occupancy = 2

    assert room_repo.update(room) is True
    assert room_repo.get_by_id(room.id) == Room(id=room.id, name="Bathroom2", max_occupancy=2)


def test_update_missing_room_returns_false(room_repo):
    assert room_repo.update(Room(id=404, name="Nowhere", max_occupancy=1)) is False
