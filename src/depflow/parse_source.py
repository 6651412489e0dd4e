"""Extract import, require and #include dependencies from source text."""

import re

from .models import Dependency

_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)

# Each pattern captures the raw specifier in group 1
DEPENDENCY_PATTERNS = (
    # import 'x', import x from 'x', import { x } from 'x', import * as x from 'x'
    re.compile(r"""\bimport(?:\s+(?:[\w*\s{},$]+)\s+from)?\s*['"]([^'"]+)['"]"""),
    # import('x'), await import('x')
    re.compile(r"""\b(?:await\s+)?import\(\s*['"]([^'"]+)['"]\s*\)"""),
    # require('x')
    re.compile(r"""\brequire\(\s*['"]([^'"]+)['"]\s*\)"""),
    # #include "x", #include <x>
    re.compile(r"""#\s*include\s+[<"]([^">]+)[">]"""),
)

_TYPE_ONLY_IMPORT = re.compile(r"\bimport\s+type\b")

EXCLUDED_EXTENSIONS = (".css", ".png", ".jpg", ".jpeg", ".svg", ".gif", ".webp")


def strip_comments(content: str) -> str:
    """Remove ``//`` line comments and non-nested ``/* */`` block comments."""
    without_lines = _LINE_COMMENT.sub("", content)
    return _BLOCK_COMMENT.sub("", without_lines)


def is_local_specifier(target: str) -> bool:
    """Check whether a specifier looks project-internal rather than a package."""
    return target.startswith(("./", "../")) or "/" in target


def extract_dependencies(source_id: str, content: str) -> list[Dependency]:
    """Extract dependencies from the text of one file.

    Matches are grouped by pattern family (static import, dynamic import,
    require, #include), in text order within each family. Duplicates are kept.

    Args:
        source_id: Identifier of the file, used as the source of every result.
        content: The file text.

    Returns:
        List of dependencies; empty when nothing qualifies.
    """
    code = strip_comments(content)
    deps: list[Dependency] = []

    for pattern in DEPENDENCY_PATTERNS:
        for match in pattern.finditer(code):
            target = match.group(1)

            # Type-only imports have no runtime dependency
            if _TYPE_ONLY_IMPORT.search(match.group(0)):
                continue
            if target.endswith(EXCLUDED_EXTENSIONS):
                continue

            deps.append(Dependency(source=source_id, target=target))

    return deps
