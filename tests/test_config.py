import json
import pytest
from unittest.mock import MagicMock
from src.core.config import ConfigManager

def test_config_defaults(tmp_path):
    config = ConfigManager(str(tmp_path / "config.json"))

    assert config.data.history.capacity == 50
    assert config.data.home.initial_temperature == 22
    assert config.data.home.living_light == "Living Room"
    assert config.data.general.log_dir is None

def test_config_written_when_missing(tmp_path):
    path = tmp_path / "nested" / "config.json"
    ConfigManager(str(path))

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["history"]["capacity"] == 50

def test_config_update_event(tmp_path):
    path = tmp_path / "config.json"
    config = ConfigManager(str(path))
    observer = MagicMock()
    config.on_changed.connect(observer)

    config.update("history", "capacity", 5)

    assert config.get("history", "capacity") == 5
    observer.assert_called_once_with("history", "capacity", 5)
    # Autosaved
    assert ConfigManager(str(path)).data.history.capacity == 5

def test_config_update_rejects_unknown_keys(tmp_path):
    config = ConfigManager(str(tmp_path / "config.json"))

    with pytest.raises(ValueError):
        config.update("nope", "capacity", 5)
    with pytest.raises(ValueError):
        config.update("history", "nope", 5)

def test_config_update_validates_capacity(tmp_path):
    config = ConfigManager(str(tmp_path / "config.json"))
    observer = MagicMock()
    config.on_changed.connect(observer)

    with pytest.raises(ValueError):
        config.update("history", "capacity", 0)

    assert config.data.history.capacity == 50
    observer.assert_not_called()

def test_config_loads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[history]\ncapacity = 3\n\n[home]\ntv = "Bedroom TV"\n', encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.data.history.capacity == 3
    assert config.data.home.tv == "Bedroom TV"
    assert config.data.home.kitchen_light == "Kitchen"

def test_config_invalid_file_keeps_defaults(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text('{"history": {"capacity": -1}}', encoding="utf-8")

    config = ConfigManager(str(path))

    assert config.data.history.capacity == 50
    assert "Failed to load config" in caplog.text
