from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.asset_tree import AssetTreeBuilder


@pytest.fixture
def asset_tree(tmp_path: Path) -> AssetTreeBuilder:
    """Provide an asset tree builder rooted at the pytest tmp_path."""
    return AssetTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _clean_build_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OUT_DIR", raising=False)
    monkeypatch.delenv("FLUENT_ICONS_VERSION", raising=False)
