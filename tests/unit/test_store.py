"""Unit tests for ledger/repository/store.py."""
from datetime import datetime, timezone
from decimal import Decimal
import pytest
from ledger.models.transaction import (
    TransactionCreate,
    TransactionStatus,
    TransactionType,
    TransactionUpdate,
)
from ledger.repository.store import TransactionStore
from ledger.validators.transaction_validator import (
    AMOUNT_NOT_POSITIVE,
    DESCRIPTION_REQUIRED,
    TRANSFER_PARTIES_REQUIRED,
)


def _data(**kwargs) -> TransactionCreate:
    defaults = dict(
        amount=Decimal("100.00"),
        description="Paycheck",
        type=TransactionType.DEPOSIT,
        status=TransactionStatus.COMPLETED,
    )
    defaults.update(kwargs)
    return TransactionCreate(**defaults)


# ── create ──────────────────────────────────────────────────────────────────

def test_create_returns_id_and_stores_fields(store):
    before = datetime.now(timezone.utc)
    data = _data(sender="ACME Payroll")
    txn_id = store.create(data)

    assert txn_id
    txn = store.get(txn_id)
    assert txn.id == txn_id
    assert txn.date >= before
    assert txn.model_dump(exclude={"id", "date"}) == data.model_dump()
    assert store.error is None


def test_create_appends_in_insertion_order(store):
    first = store.create(_data(description="first"))
    second = store.create(_data(description="second"))
    assert [t.id for t in store.transactions] == [first, second]


def test_ids_are_unique_and_not_recycled(store):
    ids = {store.create(_data()) for _ in range(20)}
    deleted = next(iter(ids))
    store.delete(deleted)
    new_id = store.create(_data())
    assert len(ids) == 20
    assert new_id not in ids


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5.00")])
def test_create_rejects_non_positive_amount(store, amount):
    assert store.create(_data(amount=amount)) == ""
    assert len(store) == 0
    assert store.error == AMOUNT_NOT_POSITIVE


def test_create_rejects_empty_description(store):
    assert store.create(_data(description="")) == ""
    assert len(store) == 0
    assert store.error == DESCRIPTION_REQUIRED


def test_amount_is_checked_before_description(store):
    store.create(_data(amount=Decimal("0"), description=""))
    assert store.error == AMOUNT_NOT_POSITIVE


@pytest.mark.parametrize(
    "sender,recipient",
    [(None, "Savings"), ("Checking", None), ("", "Savings"), ("Checking", "")],
)
def test_transfer_requires_both_parties(store, sender, recipient):
    result = store.create(_data(type=TransactionType.TRANSFER, sender=sender, recipient=recipient))
    assert result == ""
    assert len(store) == 0
    assert store.error == TRANSFER_PARTIES_REQUIRED


def test_non_transfer_does_not_need_parties(store):
    assert store.create(_data(type=TransactionType.WITHDRAWAL))
    assert store.error is None


def test_successful_create_clears_previous_error(store):
    store.create(_data(amount=Decimal("-1")))
    assert store.error is not None
    store.create(_data())
    assert store.error is None


# ── update ──────────────────────────────────────────────────────────────────

def test_update_unknown_id(store):
    store.create(_data())
    assert store.update("missing", TransactionUpdate(amount=Decimal("10"))) is False
    assert store.error == "Transaction with ID missing not found"
    assert len(store) == 1


def test_update_amount(store):
    txn_id = store.create(_data())
    assert store.update(txn_id, TransactionUpdate(amount=Decimal("10"))) is True
    assert store.get(txn_id).amount == Decimal("10")
    assert store.error is None


def test_update_rejects_non_positive_amount_and_leaves_record(store):
    txn_id = store.create(_data())
    original = store.get(txn_id)
    update = TransactionUpdate(amount=Decimal("-1"), description="changed")
    assert store.update(txn_id, update) is False
    assert store.get(txn_id) == original
    assert store.error == AMOUNT_NOT_POSITIVE


def test_update_rejects_zero_amount(store):
    txn_id = store.create(_data())
    assert store.update(txn_id, TransactionUpdate(amount=Decimal("0"))) is False


def test_update_cannot_clear_required_field(store):
    txn_id = store.create(_data())
    assert store.update(txn_id, TransactionUpdate(description=None)) is False
    assert store.get(txn_id).description == "Paycheck"


def test_update_applies_only_provided_fields(store):
    txn_id = store.create(_data(sender="Employer"))
    store.update(txn_id, TransactionUpdate(status=TransactionStatus.FAILED))
    txn = store.get(txn_id)
    assert txn.status == TransactionStatus.FAILED
    assert txn.sender == "Employer"
    assert txn.amount == Decimal("100.00")


def test_update_can_clear_optional_party(store):
    txn_id = store.create(_data(sender="Employer"))
    assert store.update(txn_id, TransactionUpdate(sender=None)) is True
    assert store.get(txn_id).sender is None


def test_update_keeps_id_date_and_position(store):
    first = store.create(_data(description="first"))
    second = store.create(_data(description="second"))
    date = store.get(first).date
    store.update(first, TransactionUpdate(description="renamed"))
    assert [t.id for t in store.transactions] == [first, second]
    assert store.get(first).date == date
    assert store.get(first).description == "renamed"


def test_update_to_transfer_does_not_revalidate_parties(store):
    txn_id = store.create(_data())
    assert store.update(txn_id, TransactionUpdate(type=TransactionType.TRANSFER)) is True
    assert store.get(txn_id).type == TransactionType.TRANSFER


# ── delete / get / clear ───────────────────────────────────────────────────

def test_delete_twice(store):
    txn_id = store.create(_data())
    assert store.delete(txn_id) is True
    assert store.get(txn_id) is None
    assert store.error is None
    assert store.delete(txn_id) is False
    assert store.error == f"Transaction with ID {txn_id} not found"


def test_get_does_not_touch_error(store):
    store.set_error("previous failure")
    assert store.get("missing") is None
    assert store.error == "previous failure"


def test_clear_all(store):
    store.create(_data())
    store.create(_data(amount=Decimal("-1")))
    store.clear_all()
    assert len(store) == 0
    assert store.transactions == ()
    assert store.error is None


def test_setters(store):
    store.set_loading(True)
    store.set_error("Network unavailable")
    assert store.is_loading is True
    assert store.error == "Network unavailable"
    store.set_error(None)
    assert store.error is None


def test_snapshot_cannot_mutate_store(store):
    txn_id = store.create(_data())
    snapshot = store.transactions
    snapshot[0].amount = Decimal("999")
    store.get(txn_id).description = "tampered"
    txn = store.get(txn_id)
    assert txn.amount == Decimal("100.00")
    assert txn.description == "Paycheck"


def test_long_text_fields_are_accepted(store):
    description = "Quarterly reconciliation " * 40
    txn_id = store.create(_data(
        type=TransactionType.TRANSFER,
        description=description,
        sender="S" * 250,
        recipient="R" * 250,
    ))
    assert txn_id
    assert store.get(txn_id).description == description
    assert store.error is None
    assert store.update(txn_id, TransactionUpdate(description="y" * 600)) is True
