"""Icon classification and identifier indexing.

File names in the Fluent icon tree encode three attributes at once::

    ic_fluent_add_circle_24_regular.svg
    <prefix><semantic core>_<size>_<style><suffix>

:func:`parse_name` peels those apart under an :class:`IconConfig` policy and
:func:`build_index` walks a tree, keeping one file per derived identifier for
each configured casing.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .casing import make_identifier
from .config import IconConfig
from .errors import TraversalError
from .logging import get_logger
from .models import AssetFile, IconIndex, ParsedName

logger = get_logger("classifier")


def _strip_tag(name: str, tags: Sequence[str]) -> Tuple[str, Optional[str]]:
    for tag in tags:
        marker = f"_{tag}"
        if name.endswith(marker):
            return name[: -len(marker)], tag
    return name, None


def parse_name(file_name: str, config: IconConfig) -> Optional[ParsedName]:
    """Return the parsed name, or ``None`` when the file is not selected by ``config``."""
    if not file_name.endswith(config.suffix):
        return None
    stem = file_name[: -len(config.suffix)] if config.suffix else file_name

    without_style, style = _strip_tag(stem, config.styles)
    if style is None:
        return None
    without_size, size = _strip_tag(without_style, config.sizes)
    if size is None:
        return None
    if not without_size.startswith(config.prefix):
        return None

    source = without_size if config.strip_variants else stem
    core = source[len(config.prefix):]
    if not core:
        return None
    return ParsedName(semantic_core=core, style=style, size=size)


def build_index(root_dir: Path | str, config: IconConfig) -> Dict[str, IconIndex]:
    """Walk ``root_dir`` and map identifiers to files, one mapping per casing.

    The returned dict is keyed by casing name in ``config.casings`` order.
    When two files derive the same identifier under a casing, the one visited
    later wins. Entries are visited in sorted name order, sub-directories
    before files.
    """
    root = Path(root_dir)
    indexes: Dict[str, IconIndex] = {casing: {} for casing in config.casings}
    _index_directory(root, config, indexes)
    for casing, index in indexes.items():
        logger.debug("Indexed %d icons for %s", len(index), casing)
    return indexes


def _index_directory(directory: Path, config: IconConfig, indexes: Dict[str, IconIndex]) -> None:
    subdirs: List[os.DirEntry] = []
    files: List[os.DirEntry] = []
    try:
        with os.scandir(directory) as handle:
            for entry in sorted(handle, key=lambda item: item.name):
                (subdirs if entry.is_dir() else files).append(entry)
    except OSError as exc:
        raise TraversalError(f"Cannot read asset directory {directory}: {exc}") from exc

    for entry in subdirs:
        _index_directory(Path(entry.path), config, indexes)

    for entry in files:
        parsed = parse_name(entry.name, config)
        if parsed is None:
            continue
        asset = AssetFile(path=Path(entry.path).resolve(), name=entry.name)
        _insert(asset, parsed, config, indexes)


def _insert(
    asset: AssetFile,
    parsed: ParsedName,
    config: IconConfig,
    indexes: Dict[str, IconIndex],
) -> None:
    for casing in config.casings:
        identifier = make_identifier(parsed.semantic_core, casing)
        if identifier is None:
            continue
        index = indexes[casing]
        previous = index.get(identifier)
        if previous is not None:
            logger.debug(
                "%s: %s replaces %s for %s", casing, asset.name, previous.name, identifier
            )
        index[identifier] = asset


__all__ = ["build_index", "parse_name"]
