"""Persistent config loader/saver for colorls."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from ..theme import DEFAULT_THEME, THEMES

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on Python <3.11
    import tomli as tomllib

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """User-facing configuration."""

    theme: str = DEFAULT_THEME
    report: bool = False
    width: int = 0
    tables_dir: str = ""


def default_config_path() -> Path:
    """Return default config path (~/.config/colorls/config.toml)."""
    return Path.home() / ".config" / "colorls" / "config.toml"


def _coerce_bool(value, default=False):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in ("1", "true", "yes", "on"):
            return True
        if lower in ("0", "false", "no", "off"):
            return False
    return default


def _coerce_int(value, default=0):
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _section(raw: dict, name: str) -> dict:
    section = raw.get(name, {})
    return section if isinstance(section, dict) else {}


def _normalize_config(raw: dict) -> AppConfig:
    ui = _section(raw, "ui")
    data = _section(raw, "data")

    theme = str(ui.get("theme", DEFAULT_THEME)).strip().lower() or DEFAULT_THEME
    if theme not in THEMES:
        LOGGER.warning("unknown theme %r, using %r", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME

    width = max(0, _coerce_int(ui.get("width"), default=0))
    tables_dir = data.get("tables_dir", "")
    return AppConfig(
        theme=theme,
        report=_coerce_bool(ui.get("report"), default=False),
        width=width,
        tables_dir=str(tables_dir).strip() if tables_dir else "",
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        LOGGER.warning("ignoring invalid config %s: %s", cfg_path, exc)
        return AppConfig()
    return _normalize_config(raw)


def _toml_string(value: str) -> str:
    """Quote *value* as a TOML basic string."""
    out = []
    for ch in value:
        if ch in ('"', "\\"):
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def serialize_config(config: AppConfig) -> str:
    """Serialize AppConfig as TOML text."""
    return (
        "# colorls user configuration\n"
        "[ui]\n"
        f"theme = {_toml_string(config.theme)}\n"
        f"report = {'true' if config.report else 'false'}\n"
        f"width = {config.width}\n"
        "\n"
        "[data]\n"
        f"tables_dir = {_toml_string(config.tables_dir)}\n"
    )


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Persist config and return written path."""
    cfg_path = Path(path) if path is not None else default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg_path.write_text(serialize_config(config), encoding="utf-8", newline="\n")
    return cfg_path
