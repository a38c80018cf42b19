"""
Path conventions for tenantdb databases.

Every named database is a single JSON file inside the database directory
(configured via `TENANTDB_URI`, defaults to `./db`):

::

    db/                         # database directory, created on first use
        db.json                 # default database
        [name].json             # named database

Each file holds a JSON array of records, one per tenant (main key):

::

    [
        {
            "id": "<main key>",
            "data": {"<field>": <json value>, ...}
        },
        ...
    ]
"""

import re
from pathlib import Path

from anystore.types import Uri

from tenantdb.exceptions import InvalidName

DEFAULT_NAME = "db"
"""Database name if none given"""

EXTENSION = "json"
"""File extension of database files"""

EMPTY = "[]"
"""Content of a freshly created database file"""

ID = "id"
"""Record attribute holding the main key"""

DATA = "data"
"""Record attribute holding the field mapping"""

INVALID_NAME = re.compile(r"[^a-z0-9_-]", re.IGNORECASE)


def validate_name(name: str | None, default: str | None = DEFAULT_NAME) -> str:
    """
    Validate a database name, falling back to the default for empty names.
    The fallback is validated the same way

    Examples:
        >>> validate_name("users")
        "users"
        >>> validate_name(None)
        "db"

    Raises:
        InvalidName: If the name contains characters outside `[A-Za-z0-9_-]`
    """
    name = name or default or DEFAULT_NAME
    if INVALID_NAME.search(name):
        raise InvalidName(f"Invalid database name: `{name}`")
    return name


def filename(name: str) -> str:
    """Get the file name for the given database name"""
    return f"{name}.{EXTENSION}"


def database(uri: Uri, name: str) -> Path:
    """Resolve the absolute path to the database file within directory `uri`"""
    return (Path(uri) / filename(name)).absolute()


def data(field: str) -> str:
    """Record-relative dotted path of a field in the data mapping"""
    return f"{DATA}.{field}"
