"""
Public convenience functions for tenantdb.

This module is the recommended entry point for client applications:

```python
from tenantdb import lake

# Get the default database (`./db/db.json`)
store = lake.get_store()

# Get a tenant of a named database
user = lake.get_tenant("jane", "users")
user.save("profile.name", "Jane")
user.load("profile.name")
```
"""

from functools import cache

from anystore.types import Uri

from tenantdb.store import FileStore, TenantStore


@cache
def get_store(name: str | None = None, uri: Uri | None = None) -> FileStore:
    """
    Get a (cached) database store.

    Args:
        name: Database name (default from TENANTDB_DEFAULT_NAME setting)
        uri: Database directory (default from TENANTDB_URI setting)

    Returns:
        FileStore instance
    """
    return FileStore(name, uri)


def get_tenant(
    main_key: str, name: str | None = None, uri: Uri | None = None
) -> TenantStore:
    """
    Get the store for a tenant of a database.

    Args:
        main_key: Tenant identifier
        name: Database name
        uri: Database directory

    Returns:
        TenantStore instance
    """
    return get_store(name, uri).set_main_key(main_key)
