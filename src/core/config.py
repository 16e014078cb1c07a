from typing import Any, Optional
import json
import os
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from loguru import logger
from .events import Signal

# --- Settings Models ---
class GeneralSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    debug_mode: bool = False
    log_dir: Optional[str] = None  # None disables the file sink

class HistorySettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    capacity: int = Field(default=50, ge=1)

class HomeSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    living_light: str = "Living Room"
    kitchen_light: str = "Kitchen"
    front_door: str = "Front Door"
    back_door: str = "Back Door"
    tv: str = "LivingRoomTV"
    initial_temperature: int = 22

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    history: HistorySettings = Field(default_factory=HistorySettings)
    home: HomeSettings = Field(default_factory=HomeSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if section not in AppConfig.model_fields:
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        # validate_assignment raises ValidationError (a ValueError) on bad values
        setattr(section_obj, key, value)
        self._save()
        self.on_changed.emit(section, key, value)

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except (OSError, ValueError, ValidationError) as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
        else:
            self._save()

    def _save(self):
        """Persist current config as JSON. TOML files are read-only."""
        if self.filepath.endswith('.toml'):
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
