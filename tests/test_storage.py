import json

import pytest

from storage import SiteStore


def test_load_missing_files_keeps_defaults(tmp_path):
    store = SiteStore(str(tmp_path / "data.json"), str(tmp_path / "port-matrices.json")).load()
    assert store.sites == []
    assert store.matrices == {}


def test_load_existing_files(tmp_path):
    (tmp_path / "data.json").write_text(json.dumps([{"Site#": "1"}]), encoding="utf-8")
    (tmp_path / "port-matrices.json").write_text(json.dumps({"Acme": [{"Port": "1"}]}), encoding="utf-8")
    store = SiteStore(str(tmp_path / "data.json"), str(tmp_path / "port-matrices.json")).load()
    assert store.site_count == 1
    assert store.matrices == {"Acme": [{"Port": "1"}]}


def test_corrupt_file_raises(tmp_path):
    (tmp_path / "data.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        SiteStore(str(tmp_path / "data.json"), str(tmp_path / "m.json")).load()


def test_replace_sites_writes_pretty_json(tmp_path):
    path = tmp_path / "nested" / "data.json"
    store = SiteStore(str(path), str(tmp_path / "m.json"))
    assert store.replace_sites([{"Site#": "7"}]) == 1
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == [{"Site#": "7"}]
    assert '\n  {' in text
    assert [p.name for p in path.parent.iterdir()] == ["data.json"]


def test_set_matrix_trims_brand_and_replaces(tmp_path):
    path = tmp_path / "m.json"
    store = SiteStore(str(tmp_path / "d.json"), str(path))
    store.set_matrix("  Acme ", [{"Port": "1"}])
    store.set_matrix("Zeta", [{"Port": "2"}])
    store.set_matrix("Acme", [{"Port": "3"}])
    assert store.matrices == {"Acme": [{"Port": "3"}], "Zeta": [{"Port": "2"}]}
    assert json.loads(path.read_text(encoding="utf-8")) == store.matrices


def test_failed_write_keeps_memory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = SiteStore(str(blocker / "data.json"), str(tmp_path / "m.json"))
    with pytest.raises(OSError):
        store.replace_sites([{"Site#": "1"}])
    assert store.sites == [{"Site#": "1"}]
