"""
TLD list parsing, validation, and candidate construction.

All functions here are pure and synchronous; I/O lives in `tldscan.sources`.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from tldscan.domain.models import DomainCandidate, TldList

_LINE_BREAKS = re.compile(r"[\r\n]+")


def parse_tld_list(text: str) -> TldList:
    """
    Split raw list text into a header line and the remaining entries.

    The first line is always treated as the header, whatever it contains.
    Empty input gives an empty header and no entries. A trailing newline
    leaves an empty final entry, which `validate_tld` rejects.
    """
    lines = _LINE_BREAKS.split(text)
    header, entries = lines[0], lines[1:]
    return TldList(header=header, entries=tuple(entries))


def validate_tld(tld: Optional[str], max_length: Optional[int] = None) -> bool:
    """
    Return True when `tld` may be combined with an SLD.

    Checked in order: non-blank, trimmed length within `max_length` (when
    given), no hyphen. Hyphenated TLDs such as IDN `xn--` labels are skipped.
    """
    if not tld or not tld.strip():
        return False
    if max_length is not None and len(tld.strip()) > max_length:
        return False
    if "-" in tld:
        return False
    return True


def build_candidate(sld: str, tld: str) -> DomainCandidate:
    return DomainCandidate(sld=sld, tld=tld)


def build_candidates(
    sld: str, tlds: TldList, max_length: Optional[int] = None
) -> Iterator[DomainCandidate]:
    """Yield a candidate for every valid entry of `tlds`, in source order."""
    for tld in tlds:
        if not validate_tld(tld, max_length):
            continue
        yield build_candidate(sld, tld)


__all__ = ["build_candidate", "build_candidates", "parse_tld_list", "validate_tld"]
