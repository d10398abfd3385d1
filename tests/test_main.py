import logging

import main
from gamevault import data_handler, settings


def test_analytics_command(tmp_path, chrono_trigger, fully_priced_item, monkeypatch, caplog):
    collection_path = tmp_path / "collection.json"
    data_handler.save_collection([chrono_trigger, fully_priced_item], collection_path)
    monkeypatch.setattr(main, "setup_logger", lambda name, level: logging.getLogger(name))

    with caplog.at_level(logging.INFO, logger="gamevault"):
        assert main.main(["analytics", str(collection_path)]) == 0

    assert "Total Items: 2" in caplog.text
    assert "SNES: 1 item(s)" in caplog.text


def test_analytics_command_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "setup_logger", lambda name, level: logging.getLogger(name))
    assert main.main(["analytics", str(tmp_path / "missing.json")]) == 1


def test_export_command_in_test_mode(tmp_path, chrono_trigger, monkeypatch):
    monkeypatch.setattr(main, "setup_logger", lambda name, level: logging.getLogger(name))
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "out")
    collection_path = tmp_path / "collection.json"
    data_handler.save_collection([chrono_trigger], collection_path)

    assert main.main(["--test", "export", str(collection_path)]) == 0
    assert len(list((tmp_path / "out").glob("game-collection-*.csv"))) == 1


def test_analytics_command_invalid_collection(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "setup_logger", lambda name, level: logging.getLogger(name))
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    invalid = tmp_path / "invalid.json"
    invalid.write_text('[{"title": "Halo"}]', encoding="utf-8")

    assert main.main(["analytics", str(broken)]) == 1
    assert main.main(["analytics", str(invalid)]) == 1
