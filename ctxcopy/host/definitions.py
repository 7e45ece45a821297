"""Best-effort enclosing function lookup for source files.

Regex scanners keyed by file extension find function-like definitions and
their line spans; the innermost span containing the cursor wins. There is no
parsing and no string or comment awareness beyond line comments. Editors
with real code intelligence should supply their own DefinitionLocator.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass

from ctxcopy.core.constants import ENCODING, ENCODING_ERRORS

logger = logging.getLogger(__name__)

PYTHON_EXTENSIONS = frozenset({".py", ".pyi", ".pyw"})
BRACE_EXTENSIONS = frozenset({
    ".c", ".h", ".cc", ".cpp", ".cxx", ".hpp", ".cs", ".java",
    ".js", ".jsx", ".mjs", ".ts", ".tsx", ".go", ".rs", ".php",
    ".kt", ".swift", ".scala",
})

# How far below a signature the opening brace may appear
_MAX_SIGNATURE_LINES = 6

_PY_DEF = re.compile(r"^(\s*)(?:async\s+)?def\s+([A-Za-z_]\w*)\s*\(")

_BRACE_DEFS = [
    # JS/TS: function name(...) / async function* name(...)
    re.compile(r"^\s*(?:export\s+)?(?:default\s+)?(?:async\s+)?function\s*\*?\s*([A-Za-z_$][\w$]*)\s*[(<]"),
    # JS/TS: const name = (...) => / const name = async x =>
    re.compile(
        r"^\s*(?:export\s+)?(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*(?::[^=]+)?=\s*"
        r"(?:async\s*)?(?:\([^)]*\)|[A-Za-z_$][\w$]*)\s*(?::\s*[^=]+)?=>"
    ),
    # Rust: pub async unsafe fn name
    re.compile(r"^\s*(?:pub(?:\([^)]*\))?\s+)?(?:const\s+)?(?:async\s+)?(?:unsafe\s+)?(?:extern\s+\"[^\"]*\"\s+)?fn\s+([A-Za-z_]\w*)"),
    # Go: func (r *Recv) Name(
    re.compile(r"^\s*func\s+(?:\([^)]*\)\s*)?([A-Za-z_]\w*)\s*[(\[]"),
    # Kotlin / Swift / Scala
    re.compile(r"^\s*(?:[a-z]+\s+)*(?:fun|func|def)\s+(?:<[^>]*>\s*)?([A-Za-z_]\w*)"),
    # JS/TS class methods: name(...) {
    re.compile(r"^\s*(?:static\s+)?(?:async\s+)?\*?([A-Za-z_$][\w$]*)\s*\([^)]*\)\s*(?::\s*[^{]+)?\{"),
    # C-like: <type tokens> name(...)  with no statement terminator on the line
    re.compile(r"^\s*(?:[\w:<>,*&\[\]]+\s+)+[*&]*([A-Za-z_~][\w:~]*)\s*\([^;]*$"),
]

# Words the C-like pattern can mistake for a function name
_NOT_FUNCTION_NAMES = frozenset({
    "if", "for", "while", "switch", "catch", "return", "else", "do",
    "sizeof", "new", "throw", "delete", "case", "typedef", "using",
})

_ARROW = "=>"


@dataclass(frozen=True)
class Definition:
    """A function-like definition and its 1-based inclusive line span."""

    name: str
    start: int
    end: int

    def contains(self, line: int) -> bool:
        return self.start <= line <= self.end


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _python_signature_end(lines: list[str], start: int) -> int:
    """Index of the line holding the colon that ends a (multi-line) def."""
    depth = 0
    for k in range(start, len(lines)):
        code = lines[k].split("#", 1)[0]
        depth += code.count("(") + code.count("[") - code.count(")") - code.count("]")
        if depth <= 0 and code.rstrip().endswith(":"):
            return k
        if depth <= 0 and ":" in code and k == start:
            # One-liner: def f(): return 1
            return k
    return start


def scan_python(lines: list[str]) -> list[Definition]:
    """Find `def` / `async def` spans using indentation."""
    definitions = []
    for i, line in enumerate(lines):
        match = _PY_DEF.match(line)
        if not match:
            continue
        def_indent = len(match.group(1).expandtabs())
        body_start = _python_signature_end(lines, i) + 1
        end = body_start - 1
        for j in range(body_start, len(lines)):
            stripped = lines[j].strip()
            if not stripped or stripped.startswith("#"):
                continue
            if _indent(lines[j].expandtabs()) <= def_indent:
                break
            end = j
        definitions.append(Definition(match.group(2), i + 1, end + 1))
    return definitions


def _strip_line_comment(line: str) -> str:
    return line.split("//", 1)[0]


def _brace_block_end(lines: list[str], start: int, arrow: bool) -> int | None:
    """Find the last line of a brace-delimited block starting at `start`.

    Returns None when the candidate turns out to be a declaration or call
    (a `;` appears before any `{`). Arrow functions with expression bodies
    end at the line holding the terminator.
    """
    balance = 0
    started = False
    for i in range(start, len(lines)):
        code = _strip_line_comment(lines[i])
        if not started:
            brace_at = code.find("{")
            semi_at = code.find(";")
            if semi_at != -1 and (brace_at == -1 or semi_at < brace_at):
                return i if arrow else None
            if brace_at == -1:
                if i - start >= _MAX_SIGNATURE_LINES:
                    return i if arrow else None
                continue
        balance += code.count("{") - code.count("}")
        if "{" in code:
            started = True
        if started and balance <= 0:
            return i
    return len(lines) - 1 if started else None


def scan_brace(lines: list[str]) -> list[Definition]:
    """Find function spans in brace-delimited languages."""
    definitions = []
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith(("//", "/*", "*", "#")):
            continue
        for pattern in _BRACE_DEFS:
            match = pattern.search(line)
            if not match:
                continue
            name = match.group(1)
            if name in _NOT_FUNCTION_NAMES:
                break
            end = _brace_block_end(lines, i, arrow=_ARROW in line)
            if end is not None:
                definitions.append(Definition(name, i + 1, end + 1))
            break
    return definitions


def scanner_for(path: str) -> Callable[[list[str]], list[Definition]] | None:
    """Pick a scanner by file extension, or None for unsupported files."""
    ext = os.path.splitext(path)[1].lower()
    if ext in PYTHON_EXTENSIONS:
        return scan_python
    if ext in BRACE_EXTENSIONS:
        return scan_brace
    return None


def innermost_definition(definitions: list[Definition], line: int) -> Definition | None:
    """Return the enclosing definition that starts last, i.e. the innermost."""
    enclosing = [d for d in definitions if d.contains(line)]
    if not enclosing:
        return None
    return max(enclosing, key=lambda d: d.start)


class SourceDefinitionLocator:
    """DefinitionLocator that reads the backing file from disk."""

    def __init__(
        self,
        file_path: str | None,
        line: int,
        override: str | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            file_path: Backing file, or None for unsaved buffers.
            line: 1-based cursor line.
            override: Explicit function name supplied by the editor. Skips
                scanning when set.
        """
        self._file_path = file_path
        self._line = line
        self._override = override

    def enclosing_function_name(self) -> str | None:
        if self._override:
            return self._override
        if not self._file_path:
            return None

        scanner = scanner_for(self._file_path)
        if scanner is None:
            logger.debug("No definition scanner for %s", self._file_path)
            return None

        try:
            with open(self._file_path, encoding=ENCODING, errors=ENCODING_ERRORS) as f:
                lines = f.read().splitlines()
        except OSError as e:
            logger.debug("Cannot read %s: %s", self._file_path, e)
            return None

        found = innermost_definition(scanner(lines), self._line)
        return found.name if found else None
