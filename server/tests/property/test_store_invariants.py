"""Property-based tests for entity store invariants."""

from datetime import date
from decimal import Decimal

from hypothesis import given
from hypothesis import strategies as st

from tourdesk.core.storage import EntityStore
from tourdesk.models import TourStatus, TransactionType

names = st.text(min_size=1, max_size=60, alphabet=st.characters(whitelist_categories=('L', 'N', 'Zs')))
statuses = st.sampled_from(list(TourStatus))
cents = st.integers(min_value=0, max_value=10_000_000).map(lambda value: Decimal(value) / 100)
dates = st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31))

tour_fields = st.fixed_dictionaries({
    "name": names,
    "description": st.one_of(st.none(), names),
    "location": names,
    "start_date": dates,
    "end_date": dates,
    "capacity": st.integers(min_value=1, max_value=500),
    "price": cents,
    "status": statuses,
})

transaction_fields = st.fixed_dictionaries({
    "type": st.sampled_from(list(TransactionType)),
    "category": names,
    "description": names,
    "amount": cents,
    "date": dates,
    "tour_id": st.one_of(st.none(), st.uuids().map(str)),
})


@given(fields=tour_fields)
def test_create_then_get_returns_input(fields):
    """Test that a created record reads back as its input plus id and timestamp."""
    store = EntityStore()

    tour = store.tours.create(fields)
    fetched = store.tours.get(tour.id)

    assert fetched is not None
    assert fetched.id
    assert fetched.created_at is not None
    for name, value in fields.items():
        assert getattr(fetched, name) == value


@given(fields=tour_fields, changes=tour_fields, keys=st.sets(st.sampled_from(
    ["name", "description", "location", "start_date", "end_date", "capacity", "price", "status"]
)))
def test_partial_update_touches_only_given_fields(fields, changes, keys):
    """Test that fields absent from an update keep their values."""
    store = EntityStore()
    tour = store.tours.create(fields)
    partial = {key: changes[key] for key in keys}

    updated = store.tours.update(tour.id, partial)

    assert updated.id == tour.id
    assert updated.created_at == tour.created_at
    for name in fields:
        expected = partial[name] if name in partial else fields[name]
        assert getattr(updated, name) == expected


@given(batch=st.lists(tour_fields, min_size=1, max_size=15), data=st.data())
def test_delete_removes_exactly_one(batch, data):
    """Test that delete removes only the targeted record."""
    store = EntityStore()
    created = [store.tours.create(fields) for fields in batch]
    victim = data.draw(st.sampled_from(created))

    assert store.tours.delete(victim.id) is True
    assert store.tours.get(victim.id) is None
    assert store.tours.count() == len(created) - 1
    assert store.tours.delete(victim.id) is False
    assert store.tours.count() == len(created) - 1
    assert [tour.id for tour in store.tours.list()] == [tour.id for tour in created if tour.id != victim.id]


@given(batch=st.lists(tour_fields, max_size=20))
def test_active_tour_count_matches_statuses(batch):
    """Test the active tour count against a direct count."""
    store = EntityStore()
    for fields in batch:
        store.tours.create(fields)

    expected = sum(1 for fields in batch if fields["status"] == TourStatus.ACTIVE)
    assert store.dashboard_stats().active_tours == expected


@given(batch=st.lists(transaction_fields, max_size=30))
def test_revenue_and_profit_are_exact(batch):
    """Test that revenue and profit equal exact decimal sums."""
    store = EntityStore()
    for fields in batch:
        store.transactions.create(fields)

    income = sum((f["amount"] for f in batch if f["type"] == TransactionType.INCOME), Decimal("0"))
    expense = sum((f["amount"] for f in batch if f["type"] == TransactionType.EXPENSE), Decimal("0"))

    snapshot = store.dashboard_stats()
    assert snapshot.total_revenue == income
    assert snapshot.net_profit == income - expense
    assert snapshot.total_revenue.as_tuple().exponent == -2
