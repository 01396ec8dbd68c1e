"""Pattern table that tags spans of a linker-script line for display.

Rules are tried in table order. A rule claims the whole text of each of its
matches; a later rule's match that overlaps an already-claimed region is
dropped, so the named word lists and the ``*(...)`` form win over the bare
``.section`` pattern.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Sequence, Tuple

from .lexicon import BUILTINS, KEYWORDS, WARNING_TOKENS


class Category(str, Enum):
    KEYWORD = "keyword"
    BUILTIN = "builtin"
    SECTION_NAME = "section-name"
    WILDCARD = "wildcard"
    HEX_ADDRESS = "hex-address"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class PatternRule:
    """Regex plus the categories assigned to its capture groups."""

    name: str
    pattern: re.Pattern[str]
    groups: Tuple[Tuple[int, Category], ...]

    @classmethod
    def compile(
        cls, name: str, regex: str, *groups: Tuple[int, Category]
    ) -> "PatternRule":
        return cls(name=name, pattern=re.compile(regex), groups=tuple(groups))


@dataclass(frozen=True, slots=True)
class ClassifiedSpan:
    start: int
    end: int
    category: Category

    def text(self, line: str) -> str:
        return line[self.start : self.end]


def _bounded(token: str) -> str:
    escaped = re.escape(token)
    if token[0].isalnum() or token[0] == "_":
        escaped = r"\b" + escaped
    if token[-1].isalnum() or token[-1] == "_":
        escaped += r"\b"
    return escaped


def _word_set(words: Iterable[str]) -> str:
    ordered = sorted(set(words), key=lambda word: (-len(word), word))
    return r"\b(?:" + "|".join(re.escape(word) for word in ordered) + r")\b"


RULES: Tuple[PatternRule, ...] = (
    PatternRule.compile(
        "warning",
        "|".join(_bounded(token) for token in WARNING_TOKENS),
        (0, Category.WARNING),
    ),
    PatternRule.compile("keyword", _word_set(KEYWORDS), (0, Category.KEYWORD)),
    PatternRule.compile("builtin", _word_set(BUILTINS), (0, Category.BUILTIN)),
    PatternRule.compile(
        "wildcard-section",
        r"(\*)\(([^()]*)\)",
        (1, Category.WILDCARD),
        (2, Category.SECTION_NAME),
    ),
    # Only decimal digits after the 0x prefix are recognised.
    PatternRule.compile("hex-address", r"\b0x[0-9]+\b", (0, Category.HEX_ADDRESS)),
    PatternRule.compile(
        "section-name", r"(?<![\w.])\.\w+(?:\.\w+)*", (0, Category.SECTION_NAME)
    ),
)


def _overlaps(left: Tuple[int, int], right: Tuple[int, int]) -> bool:
    return left[0] < right[1] and right[0] < left[1]


class LineClassification:
    """Lazy, restartable sequence of classified spans for one line.

    Nothing is matched until the object is iterated; every iteration makes a
    fresh pass over the line and yields spans ordered by start column.
    """

    __slots__ = ("line", "rules")

    def __init__(self, line: str, rules: Sequence[PatternRule] = RULES) -> None:
        self.line = line
        self.rules = tuple(rules)

    def __iter__(self) -> Iterator[ClassifiedSpan]:
        claimed: List[Tuple[int, int]] = []
        found: List[ClassifiedSpan] = []
        for rule in self.rules:
            for match in rule.pattern.finditer(self.line):
                region = match.span()
                if region[0] == region[1]:
                    continue
                if any(_overlaps(region, taken) for taken in claimed):
                    continue
                claimed.append(region)
                for group, category in rule.groups:
                    start, end = match.span(group)
                    if start < end:
                        found.append(ClassifiedSpan(start, end, category))
        found.sort(key=lambda span: (span.start, span.end))
        yield from found

    def __repr__(self) -> str:
        return f"LineClassification({self.line!r})"


def classify_line(
    line: str, rules: Sequence[PatternRule] = RULES
) -> LineClassification:
    return LineClassification(line, rules)


def classify_text(
    text: str, rules: Sequence[PatternRule] = RULES
) -> Iterator[Tuple[int, ClassifiedSpan]]:
    for row, line in enumerate(text.split("\n")):
        for span in LineClassification(line, rules):
            yield row, span


__all__ = [
    "Category",
    "ClassifiedSpan",
    "LineClassification",
    "PatternRule",
    "RULES",
    "classify_line",
    "classify_text",
]
