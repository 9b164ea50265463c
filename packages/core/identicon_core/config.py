"""Persistent identicon settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from identicon_renderer import ConfigurationError, IdenticonOptions


CONFIG_VERSION = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RenderConfig:
    size: int = 64
    margin: float = 0.08
    format: str = "png"
    background: list[int] = field(default_factory=lambda: [240, 240, 240, 255])
    foreground: list[int] | None = None

    def to_options(self, **overrides: Any) -> IdenticonOptions:
        raw = asdict(self)
        raw.update({k: v for k, v in overrides.items() if v is not None})
        return IdenticonOptions.from_mapping(raw)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    keep_files: int = 7
    console: bool = False
    file: bool = True


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Identicon"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Identicon"
    return Path.home() / ".config" / "identicon"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    try:
        cfg.render.to_options()
    except ConfigurationError as exc:
        logging.getLogger("identicon").warning(
            f"invalid render settings, using defaults: {exc}",
            extra={"event": "config_render_reset"},
        )
        cfg.render = RenderConfig()


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in LOG_LEVELS else "INFO"
    cfg.logging.keep_files = max(2, min(90, int(cfg.logging.keep_files)))
    cfg.logging.console = bool(cfg.logging.console)
    cfg.logging.file = bool(cfg.logging.file)


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 stored render options flat at the top level.
        render = dict(data.get("render", {}) or {})
        for key in ("size", "margin", "format", "background", "foreground"):
            if key in data:
                render.setdefault(key, data.pop(key))
        data["render"] = render
        data.setdefault("logging", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        render=_merge(RenderConfig, data.get("render", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
    )

    _normalize_render(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
