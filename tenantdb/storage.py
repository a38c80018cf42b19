"""DatabaseFile - whole-file JSON array storage."""

import json
import threading
import weakref
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, TypeAlias

from anystore.io import smart_read, smart_write
from anystore.logging import get_logger

from tenantdb.conventions import path
from tenantdb.exceptions import CorruptDatabase

log = get_logger(__name__)

Records: TypeAlias = list[dict[str, Any]]

INDENT = "\t"

_locks: weakref.WeakValueDictionary[Path, Any] = weakref.WeakValueDictionary()
_locks_lock = threading.Lock()


def get_lock(uri: Path) -> Any:
    """
    Get the process-wide lock for the given (absolute) file path. The lock
    lives as long as a `DatabaseFile` for that path holds it.
    """
    with _locks_lock:
        lock = _locks.get(uri)
        if lock is None:
            lock = threading.RLock()
            _locks[uri] = lock
        return lock


def loads(content: str) -> Records:
    """Parse the file content, empty content is an empty sequence"""
    if not content.strip():
        return []
    try:
        records = json.loads(content)
    except json.JSONDecodeError as e:
        raise CorruptDatabase(f"Invalid JSON: {e}") from e
    if not isinstance(records, list):
        raise CorruptDatabase(
            f"Expected a JSON array of records, got `{type(records).__name__}`"
        )
    for ix, record in enumerate(records):
        if not isinstance(record, dict):
            raise CorruptDatabase(
                f"Expected a record object at index {ix}, got `{type(record).__name__}`"
            )
    return records


def dumps(records: Records) -> str:
    return json.dumps(records, indent=INDENT, ensure_ascii=False)


class DatabaseFile:
    """
    A single database file holding a JSON array of records.

    Reads and writes always cover the full file. Use `transaction()` for a
    read-modify-write cycle that is serialized against every other
    `DatabaseFile` for the same path within this process.
    """

    def __init__(self, uri: Path) -> None:
        self.uri = Path(uri).absolute()
        self.lock = get_lock(self.uri)
        self.log = get_logger(__name__, storage=str(self.uri))

    def ensure(self) -> None:
        """Create the directory and an empty database file if missing"""
        if not self.uri.parent.is_dir():
            self.log.info(f"Creating database directory `{self.uri.parent}` ...")
            self.uri.parent.mkdir(parents=True, exist_ok=True)
        if not self.uri.exists():
            self.log.info(f"Creating database `{self.uri.name}` ...")
            smart_write(str(self.uri), path.EMPTY.encode(), mode="wb")

    def read(self) -> Records:
        with self.lock:
            self.ensure()
            content = smart_read(str(self.uri), mode="rb")
            self.log.debug("Read database", size=len(content))
            return loads(content.decode("utf-8"))

    def write(self, records: Records) -> None:
        with self.lock:
            self.ensure()
            smart_write(str(self.uri), dumps(records).encode("utf-8"), mode="wb")
            self.log.debug("Write database", records=len(records))

    @contextmanager
    def transaction(self) -> Generator[Records, None, None]:
        """
        Read the records, yield them for in-place mutation and write them back
        if the block completes without error.

        Example:
            ```python
            with db.transaction() as records:
                records.append({"id": "jane", "data": {}})
            ```
        """
        with self.lock:
            records = self.read()
            yield records
            self.write(records)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.uri})>"
