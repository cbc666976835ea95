"""Render icon indexes into a generated Python module."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Optional, Set

from .casing import to_title_case
from .logging import get_logger
from .models import AssetFile, IconIndex

logger = get_logger("emitter")

_HEADER = '''"""Fluent UI System Icons{version}.

Generated by fluent_icons. Do not edit by hand.
"""
'''


def render_declaration(identifier: str, asset: AssetFile) -> str:
    """Return the documented constant binding ``identifier`` to the asset's bytes."""
    doc = f"![{to_title_case(identifier)}]({asset.path.as_uri()})"
    payload = asset.path.read_bytes()
    return f"#: {doc}\n{identifier}: bytes = {payload!r}\n"


def render_module(indexes: Mapping[str, IconIndex], *, version: Optional[str] = None) -> str:
    """Return the source of a module declaring every indexed icon.

    Casings are emitted in mapping order and identifiers sorted within each
    casing. An identifier already declared by an earlier casing is skipped.
    """
    names: List[str] = []
    blocks: List[str] = []
    seen: Set[str] = set()
    for casing, index in indexes.items():
        for identifier in sorted(index):
            if identifier in seen:
                logger.debug("%s already declared; skipping %s duplicate", identifier, casing)
                continue
            seen.add(identifier)
            names.append(identifier)
            blocks.append(render_declaration(identifier, index[identifier]))

    header = _HEADER.format(version=f" {version}" if version else "")
    if names:
        exported = "".join(f'    "{name}",\n' for name in names)
        all_block = f"__all__ = [\n{exported}]\n"
    else:
        all_block = "__all__: list[str] = []\n"
    return "\n".join([header, all_block, *blocks])


def write_module(
    indexes: Mapping[str, IconIndex],
    output_path: Path,
    *,
    version: Optional[str] = None,
) -> Path:
    """Render ``indexes`` and write them to ``output_path``."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_module(indexes, version=version), encoding="utf-8")
    logger.info("Wrote %s", output_path)
    return output_path


__all__ = ["render_declaration", "render_module", "write_module"]
