"""
Word-list validator.

What this module does:
- Validate a dictionary file (all valid guesses) and, optionally, a targets
  file (the words a game may pick as its secret).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line)
  and the engine's word-length limit.
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that targets ⊆ dictionary.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/dictionary_5.txt", "data/targets_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from packages.engine.pattern import MAX_PATTERN_LENGTH
from packages.engine.words import is_valid_token


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool = False
    count: int = 0           # valid lines
    unique_count: int = 0    # distinct valid words
    invalid_lines: int = 0
    sha256: str = ""
    words: List[str] = field(default_factory=list, repr=False)

    @property
    def duplicates(self) -> int:
        return self.count - self.unique_count


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path_str: str, N: int) -> FileReport:
    """
    Load one list. A line is valid iff it is already lowercase, a–z only and
    exactly N long; blank lines count as invalid.
    """
    rep = FileReport(path_str)
    path = Path(path_str)
    if not path.exists():
        return rep

    rep.exists = True
    rep.sha256 = _sha256_file(path)
    seen: Counter = Counter()
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and is_valid_token(w) and len(w) == N:
                seen[w] += 1
            else:
                rep.invalid_lines += 1
    rep.count = sum(seen.values())
    rep.unique_count = len(seen)
    rep.words = sorted(seen)
    return rep


def _file_issues(label: str, rep: FileReport) -> List[str]:
    if not rep.exists:
        return [f"{label} file not found: {rep.path}"]
    issues = []
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
    if rep.duplicates:
        issues.append(f"{label} contains {rep.duplicates} duplicate line(s)")
    return issues


def _public(rep: Optional[FileReport]) -> Optional[Dict]:
    if rep is None:
        return None
    d = asdict(rep)
    d.pop("words")
    d["duplicates"] = rep.duplicates
    return d


def validate_wordlists(N: int, dictionary_path: str, targets_path: str | None = None) -> Dict:
    """
    Validate the dictionary (and optional targets) list for word length N.

    Returns a JSON-serializable dict:
      N, dictionary, targets (file reports, targets may be None),
      targets_subset_dictionary, passed, issues
    `passed` is strict: both files present and non-empty, no invalid or
    duplicate lines, targets ⊆ dictionary, and N within the engine's limit.
    """
    issues: List[str] = []
    if not 1 <= N <= MAX_PATTERN_LENGTH:
        issues.append(f"word length {N} is outside the supported range 1..{MAX_PATTERN_LENGTH}")

    dic = _scan(dictionary_path, N)
    issues += _file_issues("dictionary", dic)

    tgt = None
    subset_ok = True
    if targets_path is not None:
        tgt = _scan(targets_path, N)
        issues += _file_issues("targets", tgt)
        missing = sorted(set(tgt.words) - set(dic.words))
        subset_ok = tgt.exists and dic.exists and not missing
        if missing:
            issues.append(f"targets not subset of dictionary (e.g., {missing[:5]})")

    return {
        "N": N,
        "dictionary": _public(dic),
        "targets": _public(tgt),
        "targets_subset_dictionary": subset_ok,
        "passed": not issues,
        "issues": issues,
    }


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        N=5 | dictionary=2315 (uniq=2315, sha=abc123...) | targets=- | OK
    """
    def part(label: str, r: Optional[Dict]) -> str:
        if r is None:
            return f"{label}=-"
        return f"{label}={r['count']} (uniq={r['unique_count']}, sha={(r.get('sha256') or '')[:12]})"

    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | {part('dictionary', report['dictionary'])} "
        f"| {part('targets', report['targets'])} "
        f"| targets⊆dictionary={report['targets_subset_dictionary']} | {status}"
    )
