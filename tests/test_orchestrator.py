"""Tests for the generation pipeline."""

from __future__ import annotations

from pathlib import Path

from fluent_icons import __version__
from fluent_icons.casing import SNAKE_CASE, UPPER_CAMEL_CASE
from fluent_icons.config import BuildConfig, IconConfig
from fluent_icons.orchestrator import Orchestrator, generate
from tests._fixtures.asset_tree import AssetTreeBuilder


def _config(root: Path, **icon_overrides) -> BuildConfig:  # type: ignore[no-untyped-def]
    icons = IconConfig(sizes=["16", "20", "24"])
    for key, value in icon_overrides.items():
        setattr(icons, key, value)
    return BuildConfig(root=root, icons=icons)


def test_resolve_version_precedence(tmp_path: Path) -> None:
    config = _config(tmp_path)

    assert Orchestrator(config, environ={}).resolve_version() == __version__

    config.version = "1.1.100"
    assert Orchestrator(config, environ={}).resolve_version() == "1.1.100"

    env = {"FLUENT_ICONS_VERSION": "1.1.200"}
    assert Orchestrator(config, environ=env).resolve_version() == "1.1.200"
    assert Orchestrator(config, environ=env).resolve_version("1.1.300") == "1.1.300"


def test_resolve_paths_from_build_environment(tmp_path: Path) -> None:
    out_dir = tmp_path / "target" / "debug" / "out"
    orchestrator = Orchestrator(_config(tmp_path), environ={"OUT_DIR": str(out_dir)})

    assert orchestrator.resolve_output_dir() == out_dir
    assert orchestrator.resolve_cache_root() == (tmp_path / "target" / "fluent_icons").resolve()


def test_resolve_paths_default_to_project_root(tmp_path: Path) -> None:
    orchestrator = Orchestrator(_config(tmp_path), environ={})

    assert orchestrator.resolve_output_dir() == tmp_path / "build"
    assert orchestrator.resolve_cache_root() == tmp_path / ".fluent-icons-cache"


def test_run_with_existing_source_skips_git(
    tmp_path: Path, asset_tree: AssetTreeBuilder
) -> None:
    asset_tree.add_many(
        {
            "Add Circle/SVG/ic_fluent_add_circle_24_regular.svg": b"<svg id='r'/>",
            "Add Circle/SVG/ic_fluent_add_circle_24_filled.svg": b"<svg id='f'/>",
            "Logo/logo_32_regular.png": b"png",
        }
    )
    calls: list[list[str]] = []

    def runner(args, cwd, capture_output=False):  # type: ignore[no-untyped-def]
        calls.append(list(args))
        return ""

    config = _config(tmp_path, casings=[UPPER_CAMEL_CASE, SNAKE_CASE])
    result = Orchestrator(config, runner=runner, environ={}).run(
        version="1.1.261",
        out_dir=tmp_path / "out",
        source_dir=asset_tree.root,
    )

    assert not calls
    assert result.version == "1.1.261"
    assert result.source_dir == asset_tree.root
    assert result.output_path == tmp_path / "out" / "icons.py"
    assert result.counts == {UPPER_CAMEL_CASE: 1, SNAKE_CASE: 1}

    text = result.output_path.read_text(encoding="utf-8")
    assert "AddCircle: bytes = b\"<svg id='r'/>\"" in text
    assert "add_circle: bytes = b\"<svg id='r'/>\"" in text
    assert "logo_32_regular" not in text


def test_run_fetches_checkout_into_cache(tmp_path: Path) -> None:
    out_dir = tmp_path / "target" / "debug" / "out"
    calls: list[tuple[list[str], Path]] = []

    def runner(args, cwd, capture_output=False):  # type: ignore[no-untyped-def]
        calls.append((list(args), Path(cwd)))
        icon = Path(cwd) / "assets" / "Add" / "SVG" / "ic_fluent_add_20_filled.svg"
        icon.parent.mkdir(parents=True, exist_ok=True)
        icon.write_bytes(b"<svg/>")
        return ""

    config = _config(tmp_path)
    result = Orchestrator(config, runner=runner, environ={"OUT_DIR": str(out_dir)}).run(
        version="1.1.261"
    )

    expected_checkout = (tmp_path / "target" / "fluent_icons").resolve() / "1.1.261"
    assert result.source_dir == expected_checkout
    assert calls[0][0][:2] == ["git", "clone"]
    assert calls[0][1] == expected_checkout
    assert result.output_path == out_dir / "icons.py"
    assert "Add: bytes = b'<svg/>'" in result.output_path.read_text(encoding="utf-8")


def test_generate_uses_default_collaborators(
    tmp_path: Path, asset_tree: AssetTreeBuilder
) -> None:
    asset_tree.add("ic_fluent_add_16_regular.svg")

    result = generate(
        _config(tmp_path),
        version="1.1.261",
        out_dir=tmp_path / "out",
        source_dir=asset_tree.root,
    )

    assert result.counts == {UPPER_CAMEL_CASE: 1}
    assert result.output_path.exists()
