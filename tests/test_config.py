import pytest

from tracker.config import load_config


def test_defaults_without_file(tmp_path):
    config = load_config(str(tmp_path / "missing.yml"))

    assert config.database.path == "tracker.db"
    assert config.database.journal_mode == "WAL"
    assert config.database.synchronous == "NORMAL"
    assert config.logging.debug is False

    assert load_config() == config


def test_values_from_yaml(tmp_path):
    path = tmp_path / "tracker.yml"
    path.write_text(
        "database:\n"
        "  path: /var/lib/tracker/parcels.db\n"
        "  synchronous: FULL\n"
        "logging:\n"
        "  debug: true\n"
    )

    config = load_config(str(path))

    assert config.database.path == "/var/lib/tracker/parcels.db"
    assert config.database.synchronous == "FULL"
    assert config.database.journal_mode == "WAL"
    assert config.logging.debug is True
    assert config.logging.log_file == "tracker_debug.log"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")

    config = load_config(str(path))

    assert config.database.path == "tracker.db"


def test_unknown_key_is_rejected(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("database:\n  host: localhost\n")

    with pytest.raises(TypeError):
        load_config(str(path))
