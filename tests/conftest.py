import pytest

from tenantdb.lake import get_store
from tenantdb.store import FileStore, TenantStore


@pytest.fixture(scope="function")
def tmp_store(tmp_path) -> FileStore:
    return FileStore("tmp_store", uri=tmp_path)


@pytest.fixture(scope="function")
def jane(tmp_store) -> TenantStore:
    return tmp_store.set_main_key("jane")


@pytest.fixture(autouse=True, scope="function")
def cache_clear():
    get_store.cache_clear()
    yield
