import pytest

from persistence import session_store


@pytest.fixture
def store_path(tmp_path, monkeypatch):
    path = tmp_path / "data" / "session_store.json"
    monkeypatch.setattr(session_store, "_state_path", lambda: path)
    return path


def test_empty_store(store_path):
    assert session_store.get_file("deFile") is None
    assert not store_path.exists()


def test_save_get_delete(store_path):
    session_store.save_file("deFile", {"name": "de.csv", "content": [{"SKU": "A"}]})
    session_store.save_file("productFile", {"name": "p.xlsx", "content": []})

    de = session_store.get_file("deFile")
    assert de == {"name": "de.csv", "content": [{"SKU": "A"}], "id": "deFile"}

    session_store.delete_file("deFile")
    assert session_store.get_file("deFile") is None
    assert session_store.get_file("productFile")["name"] == "p.xlsx"


def test_clear(store_path):
    session_store.save_file("deFile", {"name": "de.csv"})
    session_store.clear()
    assert session_store.get_file("deFile") is None


def test_unknown_id_is_rejected(store_path):
    with pytest.raises(session_store.SessionStoreError):
        session_store.save_file("barcodeFile", {})


def test_corrupt_store(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(session_store.SessionStoreError):
        session_store.get_file("deFile")
