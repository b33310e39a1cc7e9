"""Git-backed Revision File Store.

Every call shells out to ``git -C <repo>``; nothing is cached except the
repository top-level path.  Paths returned and accepted are relative to the
repository root.  Rename detection is off, so a moved file is listed under
both its old and new path.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

import structlog

from tfchanges.observability.metrics import retrieval_failures_total
from tfchanges.store.base import WORKING_TREE, RevisionStoreError

_log = structlog.get_logger(component="store.git")

# Messages git prints when a path is simply missing at a revision.
_ABSENT_MARKERS = ("does not exist in", "exists on disk, but not in")


class GitRevisionStore:
    """Revision File Store backed by the ``git`` command line.

    Args:
        repo_path: Any directory inside the working tree.  Defaults to the
                   current directory.
        git:       Name or path of the git executable.
    """

    def __init__(self, repo_path: str = ".", git: str = "git") -> None:
        self._repo_path = repo_path
        self._git = git
        self._toplevel: Path | None = None

    # ------------------------------------------------------------------
    # File enumeration
    # ------------------------------------------------------------------

    def list_changed_files(self, from_revision: str, to_revision: str, directory: str) -> list[str]:
        args = ["diff", "--name-only", "--no-renames", "-z", *_range_args(from_revision, to_revision), "--", directory]
        try:
            out = self._run("list_changed_files", args)
        except RevisionStoreError as exc:
            retrieval_failures_total.labels(operation="list_changed_files").inc()
            _log.warning(
                "changed_files_unavailable",
                from_revision=from_revision,
                to_revision=to_revision,
                directory=directory,
                error=exc.detail,
            )
            return []
        return _split_nul(out)

    def list_untracked_files(self, directory: str) -> list[str]:
        args = ["ls-files", "--others", "--exclude-standard", "--full-name", "-z", "--", directory]
        return _split_nul(self._run("list_untracked_files", args))

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def read_file_at(self, path: str, revision: str) -> str | None:
        if revision == WORKING_TREE:
            return self._read_working_tree(path)

        result = self._exec(["show", f"{revision}:{path}"])
        if result.returncode == 0:
            return result.stdout.decode("utf-8", errors="replace")
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        if any(marker in stderr for marker in _ABSENT_MARKERS):
            return None
        raise RevisionStoreError("read_file_at", f"{revision}:{path}: {stderr}")

    def unified_diff(self, path: str, from_revision: str, to_revision: str) -> str:
        args = [
            "diff",
            "--no-color",
            "--no-ext-diff",
            "--no-renames",
            *_range_args(from_revision, to_revision),
            "--",
            path,
        ]
        return self._run("unified_diff", args).decode("utf-8", errors="replace")

    def _read_working_tree(self, path: str) -> str | None:
        file_path = self._repo_root() / path
        try:
            return file_path.read_bytes().decode("utf-8", errors="replace")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise RevisionStoreError("read_file_at", f"{path}: {exc}") from exc

    def _repo_root(self) -> Path:
        if self._toplevel is None:
            out = self._run("repo_root", ["rev-parse", "--show-toplevel"])
            self._toplevel = Path(out.decode("utf-8", errors="replace").strip())
        return self._toplevel

    # ------------------------------------------------------------------
    # Subprocess plumbing
    # ------------------------------------------------------------------

    def _run(self, operation: str, args: list[str]) -> bytes:
        """Run git and return stdout, raising RevisionStoreError on non-zero exit."""
        result = self._exec(args)
        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise RevisionStoreError(operation, stderr or f"git exited with status {result.returncode}")
        return result.stdout

    def _exec(self, args: list[str]) -> subprocess.CompletedProcess[bytes]:
        cmd = [self._git, "-C", self._repo_path, "-c", "core.quotepath=off", *args]
        _log.debug("git_exec", args=args)
        try:
            return subprocess.run(cmd, capture_output=True, check=False, env=_git_env())
        except OSError as exc:
            raise RevisionStoreError(args[0], str(exc)) from exc


def _range_args(from_revision: str, to_revision: str) -> list[str]:
    if to_revision == WORKING_TREE:
        return [from_revision]
    return [f"{from_revision}..{to_revision}"]


def _split_nul(out: bytes) -> list[str]:
    return [p.decode("utf-8", errors="replace") for p in out.split(b"\x00") if p]


def _git_env() -> dict[str, str]:
    # Untranslated messages keep the absence markers stable.
    return {**os.environ, "LC_ALL": "C", "GIT_TERMINAL_PROMPT": "0"}
