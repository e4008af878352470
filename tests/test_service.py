from datetime import datetime

import pytest

from tracker.errors import NotFoundError
from tracker.parcel import STATUS_DELIVERED, STATUS_REGISTERED, STATUS_SENT
from tracker.service import ParcelService


@pytest.fixture
def service(store):
    return ParcelService(store)


def test_register_stores_registered_parcel(service, store):
    parcel = service.register(1000, "Main st 1")

    assert parcel.number > 0
    assert parcel.status == STATUS_REGISTERED
    datetime.strptime(parcel.created_at, "%Y-%m-%dT%H:%M:%SZ")
    assert store.get(parcel.number) == parcel


def test_next_status_walks_to_delivered(service, store):
    parcel = service.register(1000, "Main st 1")

    assert service.next_status(parcel.number) == STATUS_SENT
    assert service.next_status(parcel.number) == STATUS_DELIVERED
    assert service.next_status(parcel.number) is None
    assert store.get(parcel.number).status == STATUS_DELIVERED


def test_next_status_leaves_unknown_status_alone(service, store):
    parcel = service.register(1000, "Main st 1")
    store.set_status(parcel.number, "returned")

    assert service.next_status(parcel.number) is None
    assert store.get(parcel.number).status == "returned"


def test_next_status_of_missing_parcel(service):
    with pytest.raises(NotFoundError) as excinfo:
        service.next_status(12345)
    assert excinfo.value.no_rows


def test_change_address_and_delete_only_while_registered(service, store):
    kept = service.register(1000, "Main st 1")
    service.next_status(kept.number)
    service.change_address(kept.number, "Elm st 2")
    service.delete(kept.number)
    assert store.get(kept.number).address == "Main st 1"

    dropped = service.register(1000, "Main st 1")
    service.change_address(dropped.number, "Elm st 2")
    assert store.get(dropped.number).address == "Elm st 2"
    service.delete(dropped.number)

    assert [p.number for p in service.client_parcels(1000)] == [kept.number]


def test_describe(service):
    parcel = service.register(77, "Main st 1")
    text = ParcelService.describe(parcel)

    assert f"#{parcel.number}" in text
    assert "client 77" in text
    assert "Main st 1" in text
    assert STATUS_REGISTERED in text
