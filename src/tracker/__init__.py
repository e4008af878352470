"""
Parcel tracker: a small SQLite persistence layer for shipment records.

This package provides:
- ParcelStore, one parameterized statement per operation
- Status-gated address changes and deletes (registered parcels only)
- ParcelService for the registered -> sent -> delivered workflow
- A command-line front end
"""

__version__ = "0.1.0"

from .parcel import Parcel, STATUS_REGISTERED, STATUS_SENT, STATUS_DELIVERED
from .errors import ParcelStoreError, NotFoundError
from .store import ParcelStore
from .service import ParcelService
from .config import TrackerConfig, load_config

__all__ = [
    'Parcel',
    'STATUS_REGISTERED',
    'STATUS_SENT',
    'STATUS_DELIVERED',
    'ParcelStoreError',
    'NotFoundError',
    'ParcelStore',
    'ParcelService',
    'TrackerConfig',
    'load_config',
]
