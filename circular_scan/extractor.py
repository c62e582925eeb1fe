"""Regex import extractor — finds import targets without parsing the source."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Both patterns are line-anchored: an import that is not the first token on
# its line (after ";", inside a string) is not matched.
_IMPORT_RE = re.compile(r"^[ \t]*import[ \t]+([^\n#;]+)", re.MULTILINE)
_FROM_RE = re.compile(
    r"^[ \t]*from[ \t]+([A-Za-z_][\w.]*)[ \t]+import\b", re.MULTILINE
)
_DOTTED_NAME_RE = re.compile(r"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*")
_ALIAS_RE = re.compile(r"\s+as\s+")
_CONTINUATION_RE = re.compile(r"\\\r?\n")


def decode_source(raw: bytes) -> str:
    """Decode file content as UTF-8, accepting a leading BOM.

    Raises UnicodeDecodeError (a ValueError) on invalid input.
    """
    return raw.decode("utf-8-sig")


def extract_imports(source: str | bytes, *, origin: str = "<source>") -> set[str]:
    """Return the raw import targets referenced by *source*.

    ``import a.b.c`` contributes only ``a``. ``from a.b import c``
    contributes both ``a.b`` and ``a``. Relative imports are ignored.

    Bytes that are not valid UTF-8 give an empty set and a warning.
    """
    if isinstance(source, bytes):
        try:
            source = decode_source(source)
        except UnicodeDecodeError as e:
            logger.warning("Could not decode %s as UTF-8: %s", origin, e)
            return set()

    # Backslash continuations belong to the statement on the line above.
    source = _CONTINUATION_RE.sub(" ", source)
    targets: set[str] = set()

    for m in _IMPORT_RE.finditer(source):
        for part in m.group(1).split(","):
            name = _dotted_name(_ALIAS_RE.split(part.strip())[0])
            if name:
                targets.add(name.split(".")[0])

    for m in _FROM_RE.finditer(source):
        module = m.group(1).rstrip(".")
        if not module:
            continue
        targets.add(module)
        targets.add(module.split(".")[0])

    return targets


def _dotted_name(text: str) -> str | None:
    m = _DOTTED_NAME_RE.fullmatch(text.strip())
    return m.group(0) if m else None
