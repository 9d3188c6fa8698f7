from __future__ import annotations
from pathlib import Path
from typing import List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a word list: one word per line, whitespace stripped.
    Blank lines and lines starting with '#' are skipped; order is preserved.
    """
    out: List[str] = []
    for ln in read_lines(p):
        if ln.startswith("#"):
            continue
        w = ln.strip()
        if w:
            out.append(w)
    return out

