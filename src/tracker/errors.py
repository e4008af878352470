"""
Exceptions raised by the parcel store.

Every driver failure is wrapped in one of these classes and chained, so
`exc.__cause__` holds the underlying sqlite3 error.
"""

from typing import Optional


class ParcelStoreError(Exception):
    """Base class for all parcel store failures."""


class InsertError(ParcelStoreError):
    def __init__(self, detail: str):
        super().__init__(f"failed to add parcel: {detail}")


class IdentityRetrievalError(ParcelStoreError):
    def __init__(self, detail: str):
        super().__init__(f"failed to read id of the added parcel: {detail}")


class NotFoundError(ParcelStoreError):
    """
    Raised by a single-row fetch.

    `no_rows` is True when the query ran and simply matched nothing. It is
    False when the read itself failed; the driver error is then chained.
    """

    def __init__(self, number: int, detail: Optional[str] = None):
        self.number = number
        self.no_rows = detail is None
        message = f"parcel {number} not found"
        if detail is not None:
            message = f"{message}: {detail}"
        super().__init__(message)


class QueryError(ParcelStoreError):
    def __init__(self, client: int, detail: str):
        self.client = client
        super().__init__(f"query for client {client} failed: {detail}")


class ScanError(ParcelStoreError):
    def __init__(self, client: int, detail: str):
        self.client = client
        super().__init__(f"failed to decode parcel row for client {client}: {detail}")


class RowsError(ParcelStoreError):
    def __init__(self, client: int, detail: str):
        self.client = client
        super().__init__(f"failed reading rows for client {client}: {detail}")


class UpdateError(ParcelStoreError):
    def __init__(self, number: int, field: str, detail: str):
        self.number = number
        self.field = field
        super().__init__(f"failed to update {field} of parcel {number}: {detail}")


class DeleteError(ParcelStoreError):
    def __init__(self, number: int, detail: str):
        self.number = number
        super().__init__(f"failed to delete parcel {number}: {detail}")
