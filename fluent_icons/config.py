"""Configuration loading for the icon generator (.fluent-icons.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .casing import CASINGS, UPPER_CAMEL_CASE
from .errors import ConfigError

CONFIG_FILENAME = ".fluent-icons.yml"

DEFAULT_REPO_URL = "https://github.com/microsoft/fluentui-system-icons"
DEFAULT_STYLES: tuple[str, ...] = ("regular", "filled")
DEFAULT_SIZES: tuple[str, ...] = ("10", "12", "16", "20", "24", "28", "32")
DEFAULT_PREFIX = "ic_fluent_"
DEFAULT_SUFFIX = ".svg"


@dataclass
class SourceConfig:
    """Where the icon repository is fetched from and cached."""

    repo_url: str = DEFAULT_REPO_URL
    cache_dir: Optional[Path] = None
    assets_subdir: str = "assets"


@dataclass
class IconConfig:
    """Style, size and casing policy applied by the classifier."""

    styles: List[str] = field(default_factory=lambda: list(DEFAULT_STYLES))
    sizes: List[str] = field(default_factory=lambda: list(DEFAULT_SIZES))
    casings: List[str] = field(default_factory=lambda: [UPPER_CAMEL_CASE])
    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    strip_variants: bool = True


@dataclass
class OutputConfig:
    """Location of the generated module."""

    dir: Optional[Path] = None
    filename: str = "icons.py"


@dataclass
class BuildConfig:
    """Represents the settings defined in .fluent-icons.yml."""

    root: Path
    version: Optional[str] = None
    source: SourceConfig = field(default_factory=SourceConfig)
    icons: IconConfig = field(default_factory=IconConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> BuildConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BuildConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source = SourceConfig()
    source_data = _as_dict(data.get("source"))
    if source_data:
        source.repo_url = _as_str(source_data.get("repo_url")) or DEFAULT_REPO_URL
        cache_dir = _as_str(source_data.get("cache_dir"))
        source.cache_dir = root / cache_dir if cache_dir else None
        source.assets_subdir = _as_str(source_data.get("assets_subdir")) or "assets"

    icons = IconConfig()
    icon_data = _as_dict(data.get("icons"))
    if icon_data:
        if "styles" in icon_data:
            icons.styles = _as_str_list(icon_data.get("styles"))
        if "sizes" in icon_data:
            icons.sizes = _as_str_list(icon_data.get("sizes"))
        if "casings" in icon_data:
            icons.casings = _as_str_list(icon_data.get("casings"))
        if "prefix" in icon_data:
            icons.prefix = _as_str(icon_data.get("prefix")) or ""
        icons.suffix = _as_str(icon_data.get("suffix")) or DEFAULT_SUFFIX
        strip_variants = _as_bool(icon_data.get("strip_variants"))
        if strip_variants is not None:
            icons.strip_variants = strip_variants
    validate_icon_config(icons)

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        out_dir = _as_str(output_data.get("dir"))
        output.dir = root / out_dir if out_dir else None
        output.filename = _as_str(output_data.get("filename")) or "icons.py"

    return BuildConfig(
        root=root,
        version=_as_str(data.get("version")),
        source=source,
        icons=icons,
        output=output,
    )


def validate_icon_config(icons: IconConfig) -> None:
    """Reject policies that could never select a file or name an unknown casing."""
    if not icons.styles:
        raise ConfigError("icons.styles must list at least one style")
    if not icons.sizes:
        raise ConfigError("icons.sizes must list at least one size")
    if not icons.casings:
        raise ConfigError("icons.casings must list at least one casing")
    unknown = [casing for casing in icons.casings if casing not in CASINGS]
    if unknown:
        known = ", ".join(sorted(CASINGS))
        raise ConfigError(f"Unknown casing(s) {', '.join(unknown)}; expected one of {known}")


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (str, int)):
        return [str(value)]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
