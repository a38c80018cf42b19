from functools import cached_property
from typing import Any

from anystore.logging import BoundLogger, get_logger
from anystore.types import Uri

from tenantdb import paths
from tenantdb.conventions import path
from tenantdb.exceptions import DataKeyNotFound, MainKeyNotFound, PathConflict
from tenantdb.model import Record
from tenantdb.settings import Settings
from tenantdb.storage import DatabaseFile, Records


class FileStore:
    """
    A named database: one JSON file holding the records of all tenants.

    Construction validates the name but doesn't touch the disk; the database
    directory and file are created by the first operation.

    Example:
        ```python
        store = FileStore("users")
        store.set_main_key("jane").save("profile.name", "Jane")
        ```
    """

    def __init__(self, name: str | None = None, uri: Uri | None = None) -> None:
        settings = Settings()
        self.name = path.validate_name(name, settings.default_name)
        self.uri = path.database(uri or settings.uri, self.name)
        self.file = DatabaseFile(self.uri)

    def set_main_key(self, main_key: str) -> "TenantStore":
        """
        Bind the store to a tenant

        Args:
            main_key: Tenant identifier, not validated

        Returns:
            The tenant-scoped store for all record operations
        """
        return TenantStore(self, main_key)

    tenant = set_main_key

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.name}: {self.uri})>"


class TenantStore:
    """
    Record operations for one tenant (main key) of a `FileStore`.

    Each operation is a full read (and for writes, a full overwrite) of the
    database file, serialized against other operations on the same file.
    Writes update every record matching the main key and append a new record
    only if none matches.
    """

    def __init__(self, store: FileStore, main_key: str) -> None:
        self.store = store
        self.main_key = main_key
        self.name = store.name
        self.uri = store.uri

    @cached_property
    def log(self) -> BoundLogger:
        """Get a struct logger with prepopulated context"""
        name = f"tenantdb.{self.__class__.__name__}.{self.name}"
        return get_logger(
            name, store=self.name, uri=str(self.uri), main_key=self.main_key
        )

    def _matches(self, records: Records) -> list[dict[str, Any]]:
        return [r for r in records if r.get(path.ID) == self.main_key]

    def _get_matches(self, records: Records) -> list[dict[str, Any]]:
        matches = self._matches(records)
        if not matches:
            raise MainKeyNotFound(self.main_key)
        return matches

    def _upsert(self, key: str, value: Any) -> None:
        if key == path.ID or key.startswith(f"{path.ID}{paths.SEPARATOR}"):
            raise PathConflict(f"Can't overwrite the main key attribute `{key}`")
        with self.store.file.transaction() as records:
            matches = self._matches(records)
            for record in matches:
                paths.put(record, key, value)
            if not matches:
                record = paths.put({path.ID: self.main_key}, key, value)
                records.append(record)
                self.log.info("Create record", key=key)

    def exists(self) -> bool:
        """Check if the tenant has a record"""
        return bool(self._matches(self.store.file.read()))

    def save(self, key: str, value: Any) -> None:
        """
        Set a field of the tenant's data, creating the record if needed

        Args:
            key: Field name, a dotted path sets nested values
            value: JSON-serializable value
        """
        self._upsert(path.data(key), value)

    def load(self, key: str) -> Any:
        """
        Get a field of the tenant's data

        Args:
            key: Field name, a dotted path gets nested values

        Raises:
            MainKeyNotFound: The tenant has no record
            DataKeyNotFound: The field is missing or holds an empty value
                (`None`, `False`, `0`, `""`)
        """
        value = None
        for record in self._get_matches(self.store.file.read()):
            value = paths.get(record, path.data(key))
            if paths.is_empty(value):
                raise DataKeyNotFound(self.main_key, key)
        return value

    def load_object(self) -> Record:
        """Get the tenant's complete record"""
        matches = self._get_matches(self.store.file.read())
        return Record.from_tree(matches[-1])

    def save_full_object(self, key: str, value: Any) -> None:
        """
        Replace a whole top-level section of the tenant's record (e.g. the
        complete `data` mapping), creating the record if needed
        """
        self._upsert(key, value)

    def delete_user(self) -> bool:
        """Delete the tenant's record entirely"""
        with self.store.file.transaction() as records:
            self._get_matches(records)
            records[:] = [r for r in records if r.get(path.ID) != self.main_key]
        self.log.info("Delete record")
        return True

    def delete_data(self, key: str) -> bool:
        """Delete a field of the tenant's data, keeping the record"""
        with self.store.file.transaction() as records:
            deleted = False
            for record in self._get_matches(records):
                deleted = paths.delete(record, path.data(key)) or deleted
            if not deleted:
                raise DataKeyNotFound(self.main_key, key)
        self.log.info("Delete data", key=key)
        return True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.name}: {self.main_key})>"
