"""File-backed per-tenant JSON document store."""

from tenantdb.exceptions import (
    DataKeyNotFound,
    InvalidName,
    MainKeyNotFound,
    TenantDbException,
)
from tenantdb.lake import get_store, get_tenant
from tenantdb.model import Record
from tenantdb.store import FileStore, TenantStore

__version__ = "0.1.0"

__all__ = [
    "FileStore",
    "TenantStore",
    "Record",
    "get_store",
    "get_tenant",
    "TenantDbException",
    "InvalidName",
    "MainKeyNotFound",
    "DataKeyNotFound",
]
