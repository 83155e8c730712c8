"""Unit tests for the in-memory repository and entity store."""

from datetime import datetime
from decimal import Decimal

from tourdesk.core.storage import EntityStore, Repository
from tourdesk.models import Tour, TourStatus


def test_create_assigns_id_and_timestamp(store, tour_fields):
    """Test that create returns the input fields plus id and timestamp."""
    tour = store.tours.create(tour_fields)

    assert tour.id
    assert isinstance(tour.created_at, datetime)
    assert tour.created_at.tzinfo is not None
    for name, value in tour_fields.items():
        assert getattr(tour, name) == value


def test_create_then_get_returns_same_record(store, tour_fields):
    """Test that a created record can be read back."""
    created = store.tours.create(tour_fields)

    assert store.tours.get(created.id) == created


def test_create_ignores_id_and_created_at_in_payload(store, tour_fields):
    """Test that callers cannot choose the id or timestamp."""
    forced = datetime(2000, 1, 1)
    tour = store.tours.create({**tour_fields, "id": "chosen", "created_at": forced})

    assert tour.id != "chosen"
    assert tour.created_at != forced
    assert store.tours.get("chosen") is None


def test_get_unknown_id_returns_none(store):
    """Test that a missing id is reported as None, not raised."""
    assert store.tours.get("does-not-exist") is None


def test_list_empty_collection(store):
    """Test that an empty collection lists as an empty sequence."""
    assert store.tours.list() == []
    assert store.tourists.list() == []
    assert store.transactions.list() == []
    assert store.files.list() == []


def test_list_preserves_insertion_order(store, tour_fields):
    """Test that records are listed in the order they were created."""
    names = ["Alpha", "Bravo", "Charlie", "Delta"]
    created = [store.tours.create({**tour_fields, "name": name}) for name in names]

    assert [tour.name for tour in store.tours.list()] == names
    assert [tour.id for tour in store.tours.list()] == [tour.id for tour in created]


def test_list_is_idempotent(store, tour_fields):
    """Test that listing twice without mutation yields identical sequences."""
    for index in range(3):
        store.tours.create({**tour_fields, "name": f"Tour {index}"})

    assert store.tours.list() == store.tours.list()


def test_update_with_empty_payload_is_noop(store, tour_fields):
    """Test that an empty partial update returns the record unchanged."""
    tour = store.tours.create(tour_fields)

    assert store.tours.update(tour.id, {}) == tour


def test_update_changes_only_given_field(store, tour_fields):
    """Test that a partial update touches only the supplied field."""
    tour = store.tours.create(tour_fields)

    updated = store.tours.update(tour.id, {"capacity": 30})

    assert updated.capacity == 30
    assert updated.id == tour.id
    assert updated.created_at == tour.created_at
    assert updated.name == tour.name
    assert updated.price == tour.price
    assert store.tours.get(tour.id) == updated


def test_update_ignores_immutable_fields(store, tour_fields):
    """Test that id and created_at in an update payload are ignored."""
    tour = store.tours.create(tour_fields)

    updated = store.tours.update(
        tour.id,
        {"id": "other", "created_at": datetime(1999, 1, 1), "status": TourStatus.COMPLETED},
    )

    assert updated.id == tour.id
    assert updated.created_at == tour.created_at
    assert updated.status == TourStatus.COMPLETED


def test_update_unknown_id_returns_none(store):
    """Test that updating a missing record reports None and creates nothing."""
    assert store.tours.update("missing", {"name": "Ghost"}) is None
    assert store.tours.count() == 0


def test_delete_existing_record(store, tour_fields):
    """Test that deleting an existing record returns True and removes it."""
    tour = store.tours.create(tour_fields)

    assert store.tours.delete(tour.id) is True
    assert store.tours.get(tour.id) is None
    assert store.tours.count() == 0


def test_delete_unknown_id_returns_false(store, tour_fields):
    """Test that deleting a missing record returns False and changes nothing."""
    store.tours.create(tour_fields)

    assert store.tours.delete("missing") is False
    assert store.tours.count() == 1


def test_update_after_delete_does_not_resurrect(store, tour_fields):
    """Test that a deleted record cannot come back through update."""
    tour = store.tours.create(tour_fields)
    store.tours.delete(tour.id)

    assert store.tours.update(tour.id, {"name": "Back again"}) is None
    assert store.tours.get(tour.id) is None


def test_deleted_ids_are_never_reused(tour_fields, monkeypatch):
    """Test that an id retired by delete is skipped when generating new ids."""
    from tourdesk.core import storage

    repository = Repository(Tour, "tour")
    ids = iter(["11111111-1111-4111-8111-111111111111"] * 2 + ["22222222-2222-4222-8222-222222222222"])
    monkeypatch.setattr(storage, "uuid4", lambda: next(ids))

    first = repository.create(tour_fields)
    repository.delete(first.id)
    second = repository.create(tour_fields)

    assert first.id == "11111111-1111-4111-8111-111111111111"
    assert second.id == "22222222-2222-4222-8222-222222222222"


def test_deleting_tour_does_not_cascade(store, tour_fields, tourist_fields):
    """Test that tourists and transactions referencing a deleted tour survive."""
    tour = store.tours.create(tour_fields)
    tourist = store.tourists.create({**tourist_fields, "tour_id": tour.id})
    transaction = store.transactions.create({
        "type": "income",
        "category": "tour-bookings",
        "description": "Booking",
        "amount": Decimal("899.50"),
        "date": tour_fields["start_date"],
        "tour_id": tour.id,
    })

    store.tours.delete(tour.id)

    assert store.tourists.get(tourist.id) == tourist
    assert store.transactions.get(transaction.id) == transaction


def test_tourist_with_dangling_tour_reference(store, tourist_fields):
    """Test that a tourist may reference a tour that does not exist."""
    tourist = store.tourists.create({**tourist_fields, "tour_id": "no-such-tour"})

    assert store.tourists.get(tourist.id).tour_id == "no-such-tour"


def test_collections_are_independent(store, tour_fields, tourist_fields):
    """Test that each entity kind has its own collection."""
    tour = store.tours.create(tour_fields)
    store.tourists.create(tourist_fields)

    assert store.tourists.get(tour.id) is None
    assert store.tours.count() == 1
    assert store.tourists.count() == 1


def test_clear_empties_every_collection(tour_fields, tourist_fields):
    """Test that clearing the store drops all records."""
    store = EntityStore()
    store.tours.create(tour_fields)
    store.tourists.create(tourist_fields)

    store.clear()

    assert all(len(repository) == 0 for repository in store.repositories)
