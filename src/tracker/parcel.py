from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence

STATUS_REGISTERED = "registered"
STATUS_SENT = "sent"
STATUS_DELIVERED = "delivered"

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass
class Parcel:
    """
    A tracked shipment record.

    `number` is assigned by the database on insert; 0 means the parcel
    has not been stored yet.
    """

    client: int
    status: str
    address: str
    created_at: str
    number: int = 0

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Parcel":
        """Decode a (number, client, status, address, created_at) row."""
        number, client, status, address, created_at = row
        return cls(
            number=_int_column("number", number),
            client=_int_column("client", client),
            status=_text_column("status", status),
            address=_text_column("address", address),
            created_at=_text_column("created_at", created_at),
        )


def _int_column(name: str, value: Any) -> int:
    if value is None or isinstance(value, bool):
        raise TypeError(f"column {name!r}: cannot decode {value!r} as integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"column {name!r}: {value!r} is not a whole number")
    return int(value)


def _text_column(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"column {name!r}: cannot decode {value!r} as text")
    return value


def now_rfc3339() -> str:
    """Current UTC time, e.g. 2024-01-01T00:00:00Z."""
    return datetime.now(timezone.utc).strftime(RFC3339_FORMAT)
