"""
Настройки загрузчика OBJ в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import json
from pathlib import Path
from wfmesh.utils.logger import logger

INDEX_POLICIES = ("error", "clamp")

DEFAULT_CONFIG = {
    # True – нечисловое поле вызывает MalformedNumberError, иначе читается как 0
    "strict_numbers": False,
    # "error" – IndexOutOfRangeError, "clamp" – прижать к [0, len - 1]
    "index_policy": "error",
    "strip_inline_comments": True,
}


class LoaderConfig:
    """Конфигурация загрузчика: JSON‑файл + явные переопределения."""

    def __init__(self, path: str = None, **overrides):
        self.path = Path(path) if path is not None else None
        self._load()
        for key, value in overrides.items():
            if key not in DEFAULT_CONFIG:
                raise KeyError(f"Unknown loader option '{key}'")
            self.data[key] = value
        self._validate()

    def _load(self):
        self.data = DEFAULT_CONFIG.copy()
        if self.path is None:
            return
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError(
                        f"expected a JSON object, got {type(loaded).__name__}")
                self.data.update(loaded)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.info("[Config] No config file – using defaults.")

    def _validate(self):
        if self.data["index_policy"] not in INDEX_POLICIES:
            raise ValueError(
                f"index_policy must be one of {INDEX_POLICIES}, "
                f"got {self.data['index_policy']!r}")

    def save(self, path: str = None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No path to save configuration to")
        try:
            with target.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        if key not in DEFAULT_CONFIG:
            raise KeyError(f"Unknown loader option '{key}'")
        self.data[key] = value
        self._validate()

    def get(self, key, default=None):
        return self.data.get(key, default)

    @property
    def strict_numbers(self) -> bool:
        return bool(self["strict_numbers"])

    @property
    def index_policy(self) -> str:
        return self["index_policy"]

    @property
    def strip_inline_comments(self) -> bool:
        return bool(self["strip_inline_comments"])
