from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from vnglyph.domain.glyph_options import GlyphOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VNGLYPH_CONFIG"
DEFAULT_CONFIG_FILENAME = "vnglyph.yaml"
OPTIONS_KEY = "glyph_options"


class SettingsStore:
    """YAML-backed glyph options store.

    Responsibilities:
      - Load/save the options file atomically
      - Convert between the YAML mapping and `GlyphOptions`

    Notes:
      - Options may sit at the top level of the file or under `glyph_options:`.
      - Loading is best-effort: a missing or broken file means defaults.
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
            self._path = Path(env_path) if env_path else Path.cwd() / DEFAULT_CONFIG_FILENAME
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to load settings from %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> bool:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
            return True
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to save settings to %s: %s", self._path, e)
            return False

    def get_glyph_options(self) -> GlyphOptions:
        s = self.load()
        nested = s.get(OPTIONS_KEY)
        if isinstance(nested, dict):
            return GlyphOptions.from_mapping(nested)
        return GlyphOptions.from_mapping(s)

    def set_glyph_options(self, options: GlyphOptions) -> bool:
        s = self.load()
        s[OPTIONS_KEY] = options.to_mapping()
        return self.save(s)
