"""Collect source records from a local checkout."""

import sys
from pathlib import Path

from .models import SourceRecord

DEFAULT_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".cpp", ".h", ".c", ".hpp", ".inl", ".py", ".go")

SKIPPED_DIRS = {"node_modules"}


def _skip_dir(name: str) -> bool:
    return name.startswith(".") or name in SKIPPED_DIRS


def iter_candidate_files(root: Path, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS):
    """Yield regular files under root with a matching suffix, in sorted order."""
    for path in sorted(root.iterdir()):
        if path.is_dir() and not path.is_symlink():
            if not _skip_dir(path.name):
                yield from iter_candidate_files(path, extensions)
        elif path.is_file() and path.suffix in extensions:
            yield path


def collect_sources(
    root: Path,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    max_files: int | None = None,
    max_file_size: int | None = None,
) -> list[SourceRecord]:
    """Read source files under root into records keyed by relative POSIX path.

    Files that are too large or cannot be read as UTF-8 are skipped with a
    warning on stderr.

    Args:
        root: Directory to scan.
        extensions: File suffixes to keep.
        max_files: Stop after this many records.
        max_file_size: Skip files larger than this many bytes.

    Returns:
        List of SourceRecord in path order.
    """
    records: list[SourceRecord] = []

    for path in iter_candidate_files(root, tuple(extensions)):
        if max_files is not None and len(records) >= max_files:
            break

        rel_path = path.relative_to(root).as_posix()
        if max_file_size is not None and path.stat().st_size > max_file_size:
            print(f"Warning: Skipping file {rel_path}: larger than {max_file_size} bytes", file=sys.stderr)
            continue

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Warning: Skipping file {rel_path}: {e}", file=sys.stderr)
            continue

        records.append(SourceRecord(path=rel_path, content=content))

    return records
