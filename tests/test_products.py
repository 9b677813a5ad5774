import pytest

from hellokit.products import ProductStore


@pytest.fixture
def store(tmp_path):
    with ProductStore(tmp_path / "test.db") as s:
        yield s


def test_create_and_first(store):
    created = store.create("L1212", 1000)
    store.create("ABC", 1001)
    found = store.first(created.id)
    assert (found.code, found.price) == ("L1212", 1000)
    assert found.deleted_at is None
    assert found.created_at == created.created_at


def test_ids_increase(store):
    a = store.create("A", 1)
    b = store.create("B", 2)
    assert b.id > a.id


def test_first_by_code(store):
    store.create("L1212", 1000)
    assert store.first_by_code("L123") is None
    assert store.first_by_code("L1212").price == 1000


def test_update_price(store):
    product = store.create("L1212", 1000)
    updated = store.update_price(product, 2000)
    assert updated.price == 2000
    assert store.first(product.id).price == 2000


def test_delete_hides_product(store):
    product = store.create("L1212", 1000)
    assert store.delete(product) is True
    assert store.first(product.id) is None
    assert store.first_by_code("L1212") is None
    assert store.delete(product) is False


def test_negative_price_rejected(store):
    with pytest.raises(ValueError):
        store.create("X", -1)


def test_data_persists(tmp_path):
    path = tmp_path / "persist.db"
    with ProductStore(path) as s:
        pid = s.create("ABC", 1001).id
    with ProductStore(path) as s:
        assert s.first(pid).code == "ABC"