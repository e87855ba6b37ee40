from __future__ import annotations

from pathlib import Path


def test_codes_before_load(fresh_legacy):
    assert fresh_legacy.get_value("db.host") == (4, None)
    assert fresh_legacy.set_value("db.host", "x") == 4
    assert fresh_legacy.delete_value("db.host") == 4
    assert fresh_legacy.dump_values() == 4


def test_load_missing_file(fresh_legacy, tmp_path: Path):
    assert fresh_legacy.load_resource(str(tmp_path / "missing.ini")) == 1


def test_full_cycle(fresh_legacy, sample_ini: Path):
    assert fresh_legacy.load_resource(str(sample_ini)) == 0
    assert fresh_legacy.get_value("db.host") == (0, "localhost")
    assert fresh_legacy.get_value("db.missing") == (3, None)
    assert fresh_legacy.get_value("cache.host") == (3, None)

    assert fresh_legacy.set_value("db.port", "5433") == 0
    assert fresh_legacy.delete_value("db.host") == 0
    assert fresh_legacy.delete_value("db.host") == 3
    assert fresh_legacy.dump_values() == 0
    assert sample_ini.read_text(encoding="utf-8") == "[db]\nport = 5433\n\n"


def test_one_store_per_process(fresh_legacy, sample_ini: Path):
    fresh_legacy.load_resource(str(sample_ini))
    assert fresh_legacy.default_store().get("db.port") == "5432"


def test_dump_failure_code(fresh_legacy, sample_ini: Path, monkeypatch):
    fresh_legacy.load_resource(str(sample_ini))

    def broken_write(self, instance):
        raise OSError("no space left")

    monkeypatch.setattr("inistore.store.parser.IniStoreParser.write", broken_write)
    assert fresh_legacy.set_value("db.port", "1") == 255
    assert fresh_legacy.dump_values() == 255


def test_undecodable_file_still_loads(fresh_legacy, tmp_path: Path, monkeypatch):
    path = tmp_path / "binary.ini"
    path.write_bytes(b"[s]\nk = \xff\xff\xff\x80\x80\n")
    monkeypatch.setattr(
        "inistore.store.parser.chardet.detect",
        lambda data: {"encoding": None, "confidence": 0.0})

    assert fresh_legacy.load_resource(str(path)) == 0
    assert fresh_legacy.dump_values() == 0


def test_strict_malformed_identifier_code(fresh_legacy, sample_ini: Path):
    fresh_legacy.load_resource(str(sample_ini))
    fresh_legacy.default_store().strict = True

    assert fresh_legacy.get_value("foo") == (2, None)
    assert fresh_legacy.set_value("foo", "bar") == 2
