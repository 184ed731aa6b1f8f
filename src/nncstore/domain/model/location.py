"""Keyword locations used to point error reports back into the input deck."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeywordLocation:
    """Where a keyword block was declared.

    The default instance (empty keyword and file, line 0) stands for
    "no location recorded".
    """

    keyword: str = ""
    filename: str = ""
    lineno: int = 0

    def __str__(self) -> str:
        if not self.keyword and not self.filename:
            return "<unknown location>"
        return f"{self.keyword} in {self.filename} line {self.lineno}"
