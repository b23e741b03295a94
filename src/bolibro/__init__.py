"""Async client for the Bolibro Rental marketplace API."""

from .address_lookup import AddressLookup
from .client import BolibroClient
from .config import Settings
from .session import SessionContext, TokenStore

__all__ = [
    "AddressLookup",
    "BolibroClient",
    "SessionContext",
    "Settings",
    "TokenStore",
]
