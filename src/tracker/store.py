import logging
import sqlite3
from contextlib import closing
from typing import Any, Dict, List

from .errors import (
    DeleteError,
    IdentityRetrievalError,
    InsertError,
    NotFoundError,
    QueryError,
    RowsError,
    ScanError,
    UpdateError,
)
from .parcel import STATUS_REGISTERED, Parcel
from .store_api import ParcelStoreAPI

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError for integers outside the signed 64-bit range.
DRIVER_ERRORS = (sqlite3.Error, OverflowError)

INSERT_PARCEL = (
    "INSERT INTO parcel (client, status, address, created_at) "
    "VALUES (:client, :status, :address, :created_at)"
)
SELECT_BY_NUMBER = (
    "SELECT number, client, status, address, created_at FROM parcel "
    "WHERE number = :number"
)
SELECT_BY_CLIENT = (
    "SELECT number, client, status, address, created_at FROM parcel "
    "WHERE client = :client"
)
UPDATE_STATUS = "UPDATE parcel SET status = :status WHERE number = :number"
# The status predicate lives in the same statement as the write.
UPDATE_ADDRESS = (
    "UPDATE parcel SET address = :address "
    "WHERE number = :number AND status = :status"
)
DELETE_PARCEL = "DELETE FROM parcel WHERE number = :number AND status = :status"


class ParcelStore(ParcelStoreAPI):
    """
    Parcel persistence over a DB-API connection (sqlite3).

    The connection is owned by the caller: the store never opens or closes
    it. Every operation is one parameterized statement, and every cursor is
    closed before the method returns.
    """

    def __init__(self, conn: sqlite3.Connection, fetch_size: int = 100):
        self.conn = conn
        self.fetch_size = fetch_size

    def add(self, parcel: Parcel) -> int:
        """Insert a parcel and return the number the database assigned."""
        params = {
            "client": parcel.client,
            "status": parcel.status,
            "address": parcel.address,
            "created_at": parcel.created_at,
        }
        try:
            with closing(self.conn.cursor()) as cursor:
                cursor.execute(INSERT_PARCEL, params)
                number = cursor.lastrowid
            self.conn.commit()
        except DRIVER_ERRORS as e:
            self._rollback()
            logger.error("Insert for client %s failed: %s", parcel.client, e)
            raise InsertError(str(e)) from e

        if number is None:
            logger.error("Insert for client %s returned no row id", parcel.client)
            raise IdentityRetrievalError("driver reported no last row id")

        logger.debug("Added parcel %d for client %s", number, parcel.client)
        return int(number)

    def get(self, number: int) -> Parcel:
        """Fetch one parcel; raises NotFoundError if it is missing or unreadable."""
        try:
            with closing(self.conn.cursor()) as cursor:
                cursor.execute(SELECT_BY_NUMBER, {"number": number})
                row = cursor.fetchone()
        except DRIVER_ERRORS as e:
            logger.error("Reading parcel %d failed: %s", number, e)
            raise NotFoundError(number, str(e)) from e

        if row is None:
            raise NotFoundError(number)

        try:
            return Parcel.from_row(row)
        except (TypeError, ValueError) as e:
            logger.error("Decoding parcel %d failed: %s", number, e)
            raise NotFoundError(number, str(e)) from e

    def get_by_client(self, client: int) -> List[Parcel]:
        """
        Return every parcel of a client in the order the engine yields them.

        An unknown client gives an empty list.
        """
        try:
            cursor = self.conn.cursor()
        except DRIVER_ERRORS as e:
            logger.error("Query for client %d failed: %s", client, e)
            raise QueryError(client, str(e)) from e

        parcels: List[Parcel] = []
        with closing(cursor):
            try:
                cursor.execute(SELECT_BY_CLIENT, {"client": client})
            except DRIVER_ERRORS as e:
                logger.error("Query for client %d failed: %s", client, e)
                raise QueryError(client, str(e)) from e

            while True:
                try:
                    rows = cursor.fetchmany(self.fetch_size)
                except DRIVER_ERRORS as e:
                    logger.error("Reading rows for client %d failed: %s", client, e)
                    raise RowsError(client, str(e)) from e
                if not rows:
                    break
                for row in rows:
                    try:
                        parcels.append(Parcel.from_row(row))
                    except (TypeError, ValueError) as e:
                        logger.error("Decoding row for client %d failed: %s", client, e)
                        raise ScanError(client, str(e)) from e

        logger.debug("Client %d has %d parcel(s)", client, len(parcels))
        return parcels

    def set_status(self, number: int, status: str) -> None:
        """Overwrite the status. A missing parcel is a silent no-op."""
        try:
            self._execute_write(UPDATE_STATUS, {"status": status, "number": number})
        except DRIVER_ERRORS as e:
            logger.error("Status update of parcel %d failed: %s", number, e)
            raise UpdateError(number, "status", str(e)) from e

    def set_address(self, number: int, address: str) -> None:
        """
        Overwrite the address while the parcel is still registered.

        Nothing happens when the parcel is missing or already past the
        registered state; the two cases are not told apart.
        """
        params = {"address": address, "number": number, "status": STATUS_REGISTERED}
        try:
            self._execute_write(UPDATE_ADDRESS, params)
        except DRIVER_ERRORS as e:
            logger.error("Address update of parcel %d failed: %s", number, e)
            raise UpdateError(number, "address", str(e)) from e

    def delete(self, number: int) -> None:
        """Delete the parcel if it is still registered, otherwise do nothing."""
        try:
            self._execute_write(
                DELETE_PARCEL, {"number": number, "status": STATUS_REGISTERED}
            )
        except DRIVER_ERRORS as e:
            logger.error("Delete of parcel %d failed: %s", number, e)
            raise DeleteError(number, str(e)) from e

    # ------------------------------------------------------------------

    def _execute_write(self, sql: str, params: Dict[str, Any]) -> None:
        try:
            with closing(self.conn.cursor()) as cursor:
                cursor.execute(sql, params)
                logger.debug("%s -> %d row(s) affected", sql, cursor.rowcount)
            self.conn.commit()
        except DRIVER_ERRORS:
            self._rollback()
            raise

    def _rollback(self) -> None:
        try:
            self.conn.rollback()
        except sqlite3.Error as e:
            logger.warning("Rollback failed: %s", e)
