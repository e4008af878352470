import logging
from typing import List, Optional

from .parcel import (
    STATUS_DELIVERED,
    STATUS_REGISTERED,
    STATUS_SENT,
    Parcel,
    now_rfc3339,
)
from .store_api import ParcelStoreAPI

logger = logging.getLogger(__name__)

NEXT_STATUS = {
    STATUS_REGISTERED: STATUS_SENT,
    STATUS_SENT: STATUS_DELIVERED,
}


class ParcelService:
    """
    Parcel workflow on top of a store: registration, moving a parcel
    along registered -> sent -> delivered, and the registered-only edits.
    """

    def __init__(self, store: ParcelStoreAPI):
        self.store = store

    def register(self, client: int, address: str) -> Parcel:
        """Store a new registered parcel stamped with the current time."""
        parcel = Parcel(
            client=client,
            status=STATUS_REGISTERED,
            address=address,
            created_at=now_rfc3339(),
        )
        parcel.number = self.store.add(parcel)
        logger.info(
            "Registered parcel %d for client %d at %s",
            parcel.number,
            client,
            parcel.created_at,
        )
        return parcel

    def client_parcels(self, client: int) -> List[Parcel]:
        """Return all parcels of a client."""
        return self.store.get_by_client(client)

    def next_status(self, number: int) -> Optional[str]:
        """
        Advance the parcel one step. Returns the new status, or None when
        the parcel is delivered (or has a status outside the progression).
        """
        parcel = self.store.get(number)
        new_status = NEXT_STATUS.get(parcel.status)
        if new_status is None:
            logger.info("Parcel %d is %s, no next status", number, parcel.status)
            return None

        self.store.set_status(number, new_status)
        logger.info("Parcel %d: %s -> %s", number, parcel.status, new_status)
        return new_status

    def change_address(self, number: int, address: str) -> None:
        """Change the address; ignored unless the parcel is registered."""
        self.store.set_address(number, address)
        logger.info("Requested address change for parcel %d", number)

    def delete(self, number: int) -> None:
        """Delete the parcel; ignored unless it is registered."""
        self.store.delete(number)
        logger.info("Requested delete of parcel %d", number)

    @staticmethod
    def describe(parcel: Parcel) -> str:
        """One-line summary of a parcel for display."""
        return (
            f"Parcel #{parcel.number}: client {parcel.client}, "
            f"address '{parcel.address}', status {parcel.status}, "
            f"created {parcel.created_at}"
        )
