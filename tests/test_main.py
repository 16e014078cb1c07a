import builtins
import json

from loguru import logger

import main as app_main
from src.core.logging import setup_logging


def test_setup_logging_file_sink(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(debug_mode=True, log_dir=str(log_dir))
    logger.debug("file sink check")
    logger.remove()

    files = list(log_dir.glob("home_remote_*.log"))
    assert len(files) == 1
    assert "file sink check" in files[0].read_text(encoding="utf-8")


def test_main_runs_menu_with_config(tmp_path, monkeypatch, capsys):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "history": {"capacity": 2},
        "home": {"living_light": "Lounge"},
    }), encoding="utf-8")

    lines = iter(["1", "9", "0"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(lines))

    assert app_main.main(["--config", str(config_path)]) == 0
    logger.remove()

    out = capsys.readouterr().out
    assert "1  - Turn on light (Lounge)" in out
    assert " - LightOn(Lounge)" in out
    assert out.rstrip().endswith("Goodbye!")
