"""Unit tests for the LedgerStore: transactions, summaries and inventory."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from site_builder.application.schemas import InventoryItemResponse
from site_builder.application.services import LedgerStore, SessionGate, transaction_categories
from site_builder.domain.entities import BusinessType, StockLevel, TransactionType
from site_builder.domain.exceptions import UnauthorizedError, ValidationFailure
from site_builder.infrastructure.storage import InMemoryKeyValueStorage


class FailingWriteStorage(InMemoryKeyValueStorage):
    """Storage whose writes fail once ``broken`` is set."""

    broken = False

    def _write_raw(self, key: str, raw: str) -> None:
        if self.broken:
            raise OSError("disk full")
        super()._write_raw(key, raw)


class FakeClock:
    """Controllable clock; call it to read the current instant."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def _transaction(**overrides) -> dict:
    payload = {
        "type": "income",
        "category": "Cortes",
        "description": "Corte degradê",
        "amount": "35.00",
        "date": "2026-10-05",
        "business_type": "barbershop",
    }
    payload.update(overrides)
    return payload


def _item(**overrides) -> dict:
    payload = {
        "name": "Pomada modeladora",
        "category": "Finalizadores",
        "quantity": 10,
        "min_quantity": 5,
        "unit_price": "29.90",
        "supplier": "Distribuidora Sul",
        "business_type": "barbershop",
    }
    payload.update(overrides)
    return payload


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def gate(storage) -> SessionGate:
    return SessionGate(storage, admin_password="segredo")


@pytest.fixture
def capability(gate: SessionGate):
    return gate.login("segredo")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 10, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(storage, gate, clock) -> LedgerStore:
    return LedgerStore(storage, gate, clock=clock)


# ── Transactions ─────────────────────────────────────────────────────

class TestTransactions:
    def test_add_assigns_unique_ids(self, store: LedgerStore, capability):
        first = store.add_transaction(_transaction(), capability)
        second = store.add_transaction(_transaction(amount="20"), capability)

        assert first.id != second.id
        assert first.amount == Decimal("35.00")
        assert first.type is TransactionType.INCOME
        assert first.date == date(2026, 10, 5)
        assert store.list_transactions(BusinessType.BARBERSHOP) == [first, second]

    def test_edit_mode_is_not_required(self, store: LedgerStore, gate: SessionGate, capability):
        assert gate.is_edit_mode is False
        store.add_transaction(_transaction(), capability)

    def test_list_is_filtered_by_business(self, store: LedgerStore, capability):
        barber = store.add_transaction(_transaction(), capability)
        auto = store.add_transaction(
            _transaction(category="Lavagem", business_type="automotive"), capability
        )

        assert store.list_transactions("barbershop") == [barber]
        assert store.list_transactions(BusinessType.AUTOMOTIVE) == [auto]

    def test_update_changes_only_given_fields(self, store: LedgerStore, capability):
        created = store.add_transaction(_transaction(), capability)

        updated = store.update_transaction(created.id, {"amount": "40.00"}, capability)

        assert updated.amount == Decimal("40.00")
        assert updated.category == created.category
        assert store.list_transactions(BusinessType.BARBERSHOP) == [updated]

    def test_update_unknown_id_is_a_no_op(self, store: LedgerStore, capability):
        store.add_transaction(_transaction(), capability)
        before = store.list_transactions(BusinessType.BARBERSHOP)

        assert store.update_transaction("missing", {"amount": "1"}, capability) is None
        assert store.list_transactions(BusinessType.BARBERSHOP) == before

    def test_delete_is_idempotent(self, store: LedgerStore, capability):
        created = store.add_transaction(_transaction(), capability)

        assert store.delete_transaction(created.id, capability) is True
        assert store.delete_transaction(created.id, capability) is False
        assert store.list_transactions(BusinessType.BARBERSHOP) == []

    @pytest.mark.parametrize("amount", ["abc", "NaN", "-5", "Infinity"])
    def test_rejects_unusable_amounts(self, store: LedgerStore, capability, amount):
        with pytest.raises(ValidationFailure) as exc_info:
            store.add_transaction(_transaction(amount=amount), capability)

        assert exc_info.value.field == "amount"
        assert store.list_transactions(BusinessType.BARBERSHOP) == []

    def test_rejects_unknown_type(self, store: LedgerStore, capability):
        with pytest.raises(ValidationFailure) as exc_info:
            store.add_transaction(_transaction(type="refund"), capability)
        assert exc_info.value.field == "type"

    def test_requires_login(self, store: LedgerStore, gate: SessionGate, capability):
        gate.logout(capability)
        with pytest.raises(UnauthorizedError):
            store.add_transaction(_transaction(), capability)
        with pytest.raises(UnauthorizedError):
            store.delete_transaction("any", None)

    def test_persists_across_instances(self, store: LedgerStore, capability, storage, gate, clock):
        created = store.add_transaction(_transaction(amount="12.345"), capability)

        reloaded = LedgerStore(storage, gate, clock=clock)

        assert reloaded.list_transactions(BusinessType.BARBERSHOP) == [created]
        assert storage.load("financial_transactions")[0]["amount"] == "12.345"

    def test_malformed_persisted_transactions_fall_back_to_empty(self, gate, clock):
        storage = InMemoryKeyValueStorage({"financial_transactions": '[{"id": 1}]'})
        store = LedgerStore(storage, gate, clock=clock)
        assert store.list_transactions(BusinessType.BARBERSHOP) == []

    def test_subscribers_are_notified(self, store: LedgerStore, capability):
        topics = []
        store.publisher.subscribe(lambda topic, snapshot: topics.append(topic))

        store.add_transaction(_transaction(), capability)
        store.add_inventory_item(_item(), capability)

        assert topics == ["transactions", "inventory"]


# ── Summaries ────────────────────────────────────────────────────────

class TestSummarize:
    def test_income_minus_expenses(self, store: LedgerStore, capability):
        store.add_transaction(_transaction(amount="100"), capability)
        store.add_transaction(
            _transaction(type="expense", category="Aluguel", amount="40"), capability
        )

        summary = store.summarize(BusinessType.BARBERSHOP)

        assert summary.total_income == Decimal("100")
        assert summary.total_expenses == Decimal("40")
        assert summary.profit == Decimal("60")

    def test_previous_month_is_excluded_from_monthly_figures(self, store: LedgerStore, capability):
        store.add_transaction(_transaction(amount="100", date="2026-10-02"), capability)
        store.add_transaction(_transaction(amount="70", date="2026-09-28"), capability)
        store.add_transaction(_transaction(amount="30", date="2025-10-10"), capability)

        summary = store.summarize(BusinessType.BARBERSHOP, as_of=date(2026, 10, 20))

        assert summary.total_income == Decimal("200")
        assert summary.monthly_income == Decimal("100")
        assert summary.monthly_expenses == Decimal("0")

    def test_defaults_to_clock_date(self, store: LedgerStore, capability, clock: FakeClock):
        store.add_transaction(_transaction(amount="50", date="2026-11-03"), capability)

        assert store.summarize(BusinessType.BARBERSHOP).monthly_income == Decimal("0")
        clock.advance(days=30)
        assert store.summarize(BusinessType.BARBERSHOP).monthly_income == Decimal("50")

    def test_other_business_is_ignored(self, store: LedgerStore, capability):
        store.add_transaction(_transaction(amount="100"), capability)
        summary = store.summarize(BusinessType.AUTOMOTIVE)
        assert summary.total_income == Decimal("0")
        assert summary.profit == Decimal("0")


# ── Inventory ────────────────────────────────────────────────────────

class TestInventory:
    def test_add_stamps_last_updated(self, store: LedgerStore, capability, clock: FakeClock):
        item = store.add_inventory_item(_item(), capability)

        assert item.last_updated == clock.now
        assert item.unit_price == Decimal("29.90")
        assert store.list_inventory(BusinessType.BARBERSHOP) == [item]

    def test_update_refreshes_last_updated(self, store: LedgerStore, capability, clock: FakeClock):
        item = store.add_inventory_item(_item(), capability)
        clock.advance(hours=2)

        updated = store.update_inventory_item(item.id, {"quantity": 3}, capability)

        assert updated.quantity == 3
        assert updated.name == item.name
        assert updated.last_updated == clock.now
        assert updated.last_updated > item.last_updated

    def test_last_updated_never_moves_backwards(self, store: LedgerStore, capability, clock: FakeClock):
        item = store.add_inventory_item(_item(), capability)
        clock.advance(hours=-5)

        updated = store.update_inventory_item(item.id, {"supplier": "Outro"}, capability)

        assert updated.last_updated == item.last_updated

    def test_last_updated_cannot_be_set_by_caller(self, store: LedgerStore, capability):
        item = store.add_inventory_item(_item(), capability)
        with pytest.raises(ValidationFailure) as exc_info:
            store.update_inventory_item(
                item.id, {"last_updated": "2000-01-01T00:00:00Z"}, capability
            )
        assert exc_info.value.field == "last_updated"

    @pytest.mark.parametrize(
        ("field", "value"),
        [("quantity", "3.5"), ("quantity", -1), ("min_quantity", "many"), ("unit_price", "NaN")],
    )
    def test_rejects_invalid_numbers(self, store: LedgerStore, capability, field, value):
        with pytest.raises(ValidationFailure) as exc_info:
            store.add_inventory_item(_item(**{field: value}), capability)
        assert exc_info.value.field == field

    def test_unknown_item(self, store: LedgerStore, capability):
        assert store.update_inventory_item("missing", {"quantity": 1}, capability) is None
        assert store.delete_inventory_item("missing", capability) is False

    def test_delete(self, store: LedgerStore, capability):
        item = store.add_inventory_item(_item(), capability)
        assert store.delete_inventory_item(item.id, capability) is True
        assert store.list_inventory(BusinessType.BARBERSHOP) == []

    @pytest.mark.parametrize(
        ("quantity", "minimum", "level"),
        [
            (0, 0, StockLevel.LOW),
            (5, 5, StockLevel.LOW),
            (6, 5, StockLevel.MEDIUM),
            (10, 5, StockLevel.MEDIUM),
            (11, 5, StockLevel.NORMAL),
        ],
    )
    def test_stock_level(self, store: LedgerStore, capability, quantity, minimum, level):
        item = store.add_inventory_item(_item(quantity=quantity, min_quantity=minimum), capability)
        assert item.stock_level is level

    def test_low_stock_items(self, store: LedgerStore, capability):
        low = store.add_inventory_item(_item(name="Lâminas", quantity=2, min_quantity=5), capability)
        store.add_inventory_item(_item(name="Shampoo", quantity=20, min_quantity=5), capability)
        store.add_inventory_item(
            _item(name="Cera", quantity=1, min_quantity=5, business_type="automotive"), capability
        )

        assert store.low_stock_items(BusinessType.BARBERSHOP) == [low]

    def test_inventory_persists(self, store: LedgerStore, capability, storage, gate, clock):
        item = store.add_inventory_item(_item(), capability)
        reloaded = LedgerStore(storage, gate, clock=clock)
        assert reloaded.list_inventory(BusinessType.BARBERSHOP) == [item]


# ── Categories ───────────────────────────────────────────────────────

def test_transaction_categories():
    assert "Cortes" in transaction_categories("barbershop", "income")
    assert "Lavagem" in transaction_categories(BusinessType.AUTOMOTIVE, TransactionType.INCOME)
    assert transaction_categories("barbershop", "expense") == transaction_categories(
        "automotive", "expense"
    )


def test_unknown_business_type_is_rejected(store: LedgerStore):
    with pytest.raises(ValidationFailure) as exc_info:
        store.list_inventory("bakery")
    assert exc_info.value.field == "business_type"


def test_inventory_response_exposes_stock_level(store: LedgerStore, capability):
    item = store.add_inventory_item(_item(quantity=1, min_quantity=5), capability)

    response = InventoryItemResponse.model_validate(item, from_attributes=True)

    assert response.stock_level is StockLevel.LOW
    assert response.id == item.id


# ── Reference timezone ───────────────────────────────────────────────

def test_current_month_follows_configured_timezone(storage, gate, capability):
    brasilia = timezone(timedelta(hours=-3))
    # 01:00 UTC on Nov 1st is still Oct 31st in UTC-3
    clock = FakeClock(datetime(2026, 11, 1, 1, 0, tzinfo=timezone.utc))
    local = LedgerStore(storage, gate, clock=clock, tz=brasilia)
    local.add_transaction(_transaction(amount="80", date="2026-10-31"), capability)

    utc = LedgerStore(storage, gate, clock=clock)

    assert local.summarize(BusinessType.BARBERSHOP).monthly_income == Decimal("80")
    assert utc.summarize(BusinessType.BARBERSHOP).monthly_income == Decimal("0")
    assert utc.summarize(BusinessType.BARBERSHOP).total_income == Decimal("80")


# ── Failed writes ────────────────────────────────────────────────────

class TestFailedWrites:
    @pytest.fixture
    def storage(self) -> FailingWriteStorage:
        return FailingWriteStorage()

    def test_failed_transaction_write_keeps_previous_state(self, store: LedgerStore, storage, capability):
        kept = store.add_transaction(_transaction(), capability)
        storage.broken = True

        with pytest.raises(OSError):
            store.add_transaction(_transaction(amount="99"), capability)
        with pytest.raises(OSError):
            store.delete_transaction(kept.id, capability)

        assert store.list_transactions(BusinessType.BARBERSHOP) == [kept]

    def test_failed_inventory_write_keeps_previous_state(self, store: LedgerStore, storage, capability):
        item = store.add_inventory_item(_item(), capability)
        storage.broken = True

        with pytest.raises(OSError):
            store.update_inventory_item(item.id, {"quantity": 1}, capability)

        assert store.list_inventory(BusinessType.BARBERSHOP) == [item]

    def test_subscribers_are_not_notified(self, store: LedgerStore, storage, capability):
        topics = []
        store.publisher.subscribe(lambda topic, snapshot: topics.append(topic))
        storage.broken = True

        with pytest.raises(OSError):
            store.add_transaction(_transaction(), capability)

        assert topics == []
