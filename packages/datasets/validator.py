"""
Word-list validator.

What this module does:
- Validate the pair of word lists a game is started from: target words (the
  pool hidden words are drawn from) and valid words (the guess dictionary).
- Enforce formatting rules (alphabetic, at least MIN_WORD_LENGTH letters,
  one per line; '#' comments and blank lines are ignored like the loader does).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that targets ⊆ valid words.
- Return a machine-readable dict and provide a pretty one-line summary.

A missing or empty valid-words file is reported as an issue but does not fail
validation: the game then accepts any guess. An empty target list fails it.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("target_words.txt", "valid_words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Iterable, List, Tuple
import hashlib

from packages.engine import MIN_WORD_LENGTH
from .io import read_words


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after case-folding)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (targets, valid) pair."""
    targets: FileReport
    valid: FileReport
    targets_subset_valid: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def split_words(words: Iterable[str]) -> Tuple[List[str], int]:
    """
    Split words into playable (lowercased) and invalid.

    A word is playable if it is alphabetic and has at least MIN_WORD_LENGTH letters.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    for w in words:
        if w.isalpha() and len(w) >= MIN_WORD_LENGTH:
            valid.append(w.lower())
        else:
            invalid += 1
    return valid, invalid


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    return split_words(read_words(path))


def _report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def _missing(path: str) -> FileReport:
    return FileReport(path, False, 0, "", 0, 0)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(target_path: str, valid_path: str) -> Dict:
    """
    Validate the target/valid word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - targets ⊆ valid check (vacuously True when there is no dictionary)
          - `passed` boolean (requires a non-empty, clean target list)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    tgt_p = Path(target_path)
    val_p = Path(valid_path)

    if not tgt_p.exists():
        issues.append(f"target words file not found: {target_path}")
        if not val_p.exists():
            issues.append(f"valid words file not found: {valid_path}")
        rep = ValidationReport(
            targets=_missing(target_path),
            valid=_missing(valid_path),
            targets_subset_valid=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    targets, tgt_invalid = _load_and_check(tgt_p)
    tgt_report = _report(tgt_p, targets, tgt_invalid)

    if val_p.exists():
        valid, val_invalid = _load_and_check(val_p)
        val_report = _report(val_p, valid, val_invalid)
    else:
        valid, val_invalid = [], 0
        val_report = _missing(valid_path)
        issues.append(f"valid words file not found: {valid_path} (any guess will be accepted)")

    if tgt_report.count == 0:
        issues.append("target words file contains 0 valid words")
    if val_report.exists and val_report.count == 0:
        issues.append("valid words file contains 0 valid words (any guess will be accepted)")

    if tgt_invalid:
        issues.append(f"target words has {tgt_invalid} invalid line(s)")
    if val_invalid:
        issues.append(f"valid words has {val_invalid} invalid line(s)")

    if tgt_report.count != tgt_report.unique_count:
        issues.append("target words contains duplicate lines")
    if val_report.count != val_report.unique_count:
        issues.append("valid words contains duplicate lines")

    # Without a dictionary every target is trivially guessable.
    valid_set = set(valid)
    subset_ok = not valid_set or set(targets).issubset(valid_set)
    if not subset_ok:
        missing = sorted(set(targets) - valid_set)[:5]
        issues.append(f"target words not subset of valid words (e.g., {missing})")

    passed = tgt_report.count > 0 and tgt_invalid == 0

    rep = ValidationReport(
        targets=tgt_report,
        valid=val_report,
        targets_subset_valid=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/logs.

    Example:
        targets=2315 (uniq=2315, sha=abc123...) | valid=10657 (uniq=10657, sha=def456...) | targets⊆valid=True | OK
    """
    a = report["targets"]
    b = report["valid"]
    subset = report["targets_subset_valid"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"targets={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| valid={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| targets⊆valid={subset} | {status}"
    )
