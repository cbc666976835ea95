"""Core data models shared across the generator components."""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class AssetFile:
    """A leaf file in the retrieved asset tree."""

    path: Path
    name: str


@dataclass(frozen=True)
class ParsedName:
    """File name split into the icon's semantic core and its variant tags."""

    semantic_core: str
    style: Optional[str] = None
    size: Optional[str] = None


IconIndex = Dict[str, AssetFile]
