"""Pipeline orchestration: retrieve, classify, emit."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from . import __version__
from .classifier import build_index
from .config import BuildConfig
from .emitter import write_module
from .git.retriever import Retriever
from .logging import get_logger

OUT_DIR_ENV = "OUT_DIR"
VERSION_ENV = "FLUENT_ICONS_VERSION"


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    version: str
    source_dir: Path
    output_path: Path
    counts: Dict[str, int]


class Orchestrator:
    """Runs retrieval, indexing and emission strictly in sequence."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        runner: Callable[..., str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.config = config
        self._runner = runner
        self._environ = dict(os.environ if environ is None else environ)
        self.logger = get_logger("orchestrator")

    def resolve_version(self, override: str | None = None) -> str:
        return (
            override
            or self._environ.get(VERSION_ENV)
            or self.config.version
            or __version__
        )

    def resolve_output_dir(self, override: Path | None = None) -> Path:
        if override is not None:
            return Path(override)
        out_dir = self._environ.get(OUT_DIR_ENV)
        if out_dir:
            return Path(out_dir)
        if self.config.output.dir is not None:
            return self.config.output.dir
        return self.config.root / "build"

    def resolve_cache_root(self) -> Path:
        if self.config.source.cache_dir is not None:
            return self.config.source.cache_dir
        out_dir = self._environ.get(OUT_DIR_ENV)
        if out_dir:
            # Shared by every build profile that writes below the same target dir.
            return (Path(out_dir) / ".." / ".." / "fluent_icons").resolve()
        return self.config.root / ".fluent-icons-cache"

    def retriever(self) -> Retriever:
        return Retriever(
            self.resolve_cache_root(),
            repo_url=self.config.source.repo_url,
            runner=self._runner,
        )

    def run(
        self,
        *,
        version: str | None = None,
        out_dir: Path | None = None,
        source_dir: Path | None = None,
    ) -> GenerationResult:
        """Generate the icon module; ``source_dir`` skips retrieval."""
        resolved_version = self.resolve_version(version)
        output_dir = self.resolve_output_dir(out_dir)
        self.logger.info("Generating icons for version %s", resolved_version)

        if source_dir is None:
            checkout = self.retriever().ensure(resolved_version)
        else:
            checkout = Path(source_dir)
            self.logger.info("Using existing icon tree at %s", checkout)

        assets_dir = checkout / self.config.source.assets_subdir
        indexes = build_index(assets_dir, self.config.icons)
        counts = {casing: len(index) for casing, index in indexes.items()}
        for casing, count in counts.items():
            self.logger.info("%s: %d icons", casing, count)

        output_path = write_module(
            indexes,
            output_dir / self.config.output.filename,
            version=resolved_version,
        )
        return GenerationResult(
            version=resolved_version,
            source_dir=checkout,
            output_path=output_path,
            counts=counts,
        )


def generate(
    config: BuildConfig,
    *,
    version: Optional[str] = None,
    out_dir: Optional[Path] = None,
    source_dir: Optional[Path] = None,
) -> GenerationResult:
    """Run the full pipeline with default collaborators."""
    return Orchestrator(config).run(version=version, out_dir=out_dir, source_dir=source_dir)


__all__ = ["GenerationResult", "Orchestrator", "generate"]
