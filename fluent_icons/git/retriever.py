"""Version-pinned checkout of the icon repository."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable, Iterable

from ..config import DEFAULT_REPO_URL
from ..errors import RetrievalError
from ..logging import get_logger


class Retriever:
    """Keeps ``<cache_root>/<version>`` in sync with the published tag."""

    def __init__(
        self,
        cache_root: Path,
        *,
        repo_url: str = DEFAULT_REPO_URL,
        runner: Callable[..., str] | None = None,
    ) -> None:
        self.cache_root = Path(cache_root)
        self.repo_url = repo_url
        self._runner = runner or self._default_runner
        self.logger = get_logger("retriever")

    def checkout_dir(self, version: str) -> Path:
        return self.cache_root / version

    def ensure(self, version: str) -> Path:
        """Return a checkout of ``version``, resetting or re-cloning as needed.

        Only a directory holding its own ``.git`` is reset in place; anything
        else (an interrupted clone, a stray directory) is cleared and cloned
        again so git never falls through to an enclosing repository.
        """
        git_dir = self.checkout_dir(version)

        if (git_dir / ".git").exists() and self._reset(git_dir, version):
            self.logger.info("Reused icon checkout at %s", git_dir)
            return git_dir

        self._clone(git_dir, version)
        self.logger.info("Cloned icons %s into %s", version, git_dir)
        return git_dir

    # ------------------------------------------------------------------
    # Helpers

    def _reset(self, git_dir: Path, version: str) -> bool:
        try:
            self._run(["git", "reset", "--hard", version], cwd=git_dir)
            self._run(["git", "clean", "-fdx"], cwd=git_dir)
        except (subprocess.CalledProcessError, OSError) as exc:
            self.logger.info("git reset failed in %s (%s); fetching again", git_dir, exc)
            return False
        return True

    def _clone(self, git_dir: Path, version: str) -> None:
        try:
            shutil.rmtree(git_dir)
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise RetrievalError(f"Cannot clear stale checkout {git_dir}: {exc}") from exc

        try:
            git_dir.mkdir(parents=True, exist_ok=True)
            self._run(
                [
                    "git",
                    "clone",
                    "--depth",
                    "1",
                    "--branch",
                    version,
                    self.repo_url,
                    "./",
                ],
                cwd=git_dir,
            )
        except (subprocess.CalledProcessError, OSError) as exc:
            raise RetrievalError(
                f"git clone of {self.repo_url} at {version} failed: {exc}"
            ) from exc

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        args = list(args)
        self.logger.debug("Running %s in %s", " ".join(args), cwd)
        return self._runner(args, cwd=cwd)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        if capture_output:
            return completed.stdout
        return ""


__all__ = ["Retriever"]
