"""Local HTML loading for the CLI."""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

HTML_SUFFIXES = (".html", ".htm")
SKIPPED_DIRECTORIES = frozenset({"node_modules", ".git"})


class DocumentLoadError(ValueError):
    """Raised when a file or directory to analyze cannot be read."""


def find_html_files(directory: str | Path) -> list[Path]:
    """Recursively list HTML files under ``directory`` in sorted order.

    ``node_modules`` and ``.git`` are not descended into. Each directory is
    walked once, so symlink loops do not repeat files.

    Raises:
        DocumentLoadError: If the directory does not exist
    """
    root = Path(directory)
    if not root.is_dir():
        raise DocumentLoadError(f"Directory not found: {directory}")

    found = []
    visited = set()
    stack = [root]
    while stack:
        current = stack.pop()
        resolved = current.resolve()
        if resolved in visited:
            logger.debug("Skipping already visited directory %s", current)
            continue
        visited.add(resolved)
        try:
            entries = sorted(current.iterdir())
        except OSError as exc:
            logger.warning("Skipping unreadable directory %s: %s", current, exc)
            continue
        for entry in entries:
            if entry.is_dir():
                if entry.name not in SKIPPED_DIRECTORIES:
                    stack.append(entry)
            elif entry.suffix.lower() in HTML_SUFFIXES:
                found.append(entry)
    return sorted(found)


def read_html(path: str | Path) -> str:
    """Read an HTML file as UTF-8, replacing undecodable bytes.

    Raises:
        DocumentLoadError: If the file is missing or unreadable
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise DocumentLoadError(f"File not found: {path}")
    try:
        return file_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        raise DocumentLoadError(f"Could not read {path}: {exc}") from exc


def load_documents(target: str | Path) -> list[tuple[str, str]]:
    """Load ``(page_identifier, html)`` pairs from a file or a directory.

    Identifiers are paths relative to the directory (POSIX separators), or the
    path as given for a single file.

    Raises:
        DocumentLoadError: If the target does not exist
    """
    path = Path(target)
    if path.is_file():
        return [(str(target), read_html(path))]
    if not path.exists():
        raise DocumentLoadError(f"Path not found: {target}")

    return [
        (file_path.relative_to(path).as_posix(), read_html(file_path))
        for file_path in find_html_files(path)
    ]
