ERR_MAIN_KEY_NOT_FOUND = "ERR_MAIN_KEY_NOT_FOUND"
ERR_DATA_KEY_NOT_FOUND = "ERR_DATA_KEY_NOT_FOUND"


class TenantDbException(Exception):
    """Base exception for all store errors"""

    code: str | None = None


class InvalidName(TenantDbException, ValueError):
    """Database name contains characters outside `[A-Za-z0-9_-]`"""


class CorruptDatabase(TenantDbException):
    """Database file content is not a JSON array of records"""


class PathConflict(TenantDbException, TypeError):
    """A dotted path runs through a value that is not an object"""


class MainKeyNotFound(TenantDbException, KeyError):
    code = ERR_MAIN_KEY_NOT_FOUND

    def __init__(self, main_key: str) -> None:
        self.main_key = main_key
        super().__init__(f'Mainkey "{main_key}" not found in database')

    def __str__(self) -> str:
        return self.args[0]


class DataKeyNotFound(TenantDbException, KeyError):
    code = ERR_DATA_KEY_NOT_FOUND

    def __init__(self, main_key: str, key: str) -> None:
        self.main_key = main_key
        self.key = key
        super().__init__(f'Data key "{key}" not found for main key "{main_key}"')

    def __str__(self) -> str:
        return self.args[0]
