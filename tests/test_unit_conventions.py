import string

import pytest

from tenantdb.conventions import path
from tenantdb.exceptions import InvalidName
from tenantdb.store import FileStore


def test_conventions_validate_name():
    assert path.validate_name("users") == "users"
    assert path.validate_name("Users_2024-a") == "Users_2024-a"
    assert path.validate_name(None) == "db"
    assert path.validate_name("") == "db"
    assert path.validate_name("", "other") == "other"
    # the fallback is validated, too
    for default in ("../x", "a.b", "a b"):
        with pytest.raises(InvalidName):
            path.validate_name(None, default)
    assert path.validate_name("users", "../x") == "users"

    for char in string.ascii_letters + string.digits + "_-":
        assert path.validate_name(char) == char

    for name in ("../etc", "a b", "a.json", "a/b", "ä", "name!", "a\n", "*"):
        with pytest.raises(InvalidName):
            path.validate_name(name)

    # InvalidName is a ValueError
    with pytest.raises(ValueError):
        path.validate_name("a.b")


def test_conventions_database(tmp_path):
    assert path.filename("users") == "users.json"
    assert path.database(tmp_path, "users") == tmp_path / "users.json"
    assert path.database("db", "db").is_absolute()
    assert path.data("profile.name") == "data.profile.name"


def test_conventions_store_no_io(tmp_path):
    store = FileStore("users", uri=tmp_path / "db")
    assert store.name == "users"
    assert store.uri == tmp_path / "db" / "users.json"
    # construction doesn't touch the disk
    assert not (tmp_path / "db").exists()

    with pytest.raises(InvalidName):
        FileStore("users.json", uri=tmp_path / "db")
    assert not (tmp_path / "db").exists()
