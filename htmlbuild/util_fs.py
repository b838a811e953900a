"""Filesystem utilities for htmlbuild."""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class HtmlSaveError(OSError):
    """Raised when a rendered document cannot be written to disk."""


def ensure_dir(path: PathLike) -> Path:
    """Ensure that a directory exists and return the Path object."""

    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def save_html(path: PathLike, content: str) -> Path:
    """Write ``content`` verbatim to ``path``, creating parent directories.

    Line endings are written as given. Any filesystem failure is raised as
    :class:`HtmlSaveError` chained to the original ``OSError``.
    """

    file_path = Path(path)
    try:
        ensure_dir(file_path.parent)
    except OSError as exc:
        raise HtmlSaveError(f"Failed to create directory {file_path.parent}: {exc}") from exc

    try:
        with file_path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise HtmlSaveError(f"Failed to save HTML to {file_path}: {exc}") from exc
    return file_path


__all__ = ["HtmlSaveError", "PathLike", "ensure_dir", "save_html"]
