from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .constants import UNCLASSIFIED_LEVEL
from .models import InternshipRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelVocabulary:
    """Keyword lists per level label, in match-priority order."""

    entries: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()

    @property
    def order(self) -> List[str]:
        return [label for label, _ in self.entries]

    def match(self, text: str) -> str:
        for label, keywords in self.entries:
            if any(keyword in text for keyword in keywords):
                return label
        return UNCLASSIFIED_LEVEL

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Iterable[str]]) -> "LevelVocabulary":
        entries = tuple(
            (label, tuple(keyword.strip().lower() for keyword in keywords if keyword.strip()))
            for label, keywords in mapping.items()
        )
        return cls(entries)


def load_vocabulary(path: Path | None = None) -> LevelVocabulary:
    if path is None:
        path = Path(__file__).with_name("levels.yaml")
    if not path.exists():
        logger.warning("Level vocabulary %s not found; every level falls back to raw text", path)
        return LevelVocabulary()
    sections: Dict[str, List[str]] = {}
    current: str | None = None
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.split("#", 1)[0].rstrip()
        if not line:
            continue
        if not line.startswith(" "):
            current = line.strip().rstrip(":").strip()
            if current:
                sections.setdefault(current, [])
            continue
        if current is None:
            continue
        keyword = line.strip()
        if keyword.startswith("-"):
            keyword = keyword[1:]
        keyword = keyword.strip().strip("\"'")
        if keyword:
            sections[current].append(keyword)
    return LevelVocabulary.from_mapping(sections)


def canonicalize(text: Optional[str]) -> str:
    return " ".join((text or "").split())


def same_level(a: Optional[str], b: Optional[str]) -> bool:
    return canonicalize(a).casefold() == canonicalize(b).casefold()


@dataclass
class LevelClassifier:
    vocabulary: LevelVocabulary = field(default_factory=load_vocabulary)

    def classify_text(self, value: Optional[str]) -> str:
        text = canonicalize(value).lower()
        if not text:
            return UNCLASSIFIED_LEVEL
        return self.vocabulary.match(text)

    def classify(self, record: InternshipRecord) -> str:
        level = canonicalize(record.level)
        if level:
            return self.classify_text(level) or level
        return self.classify_text(record.institution)

    def level_options(self, records: Iterable[InternshipRecord]) -> List[str]:
        seen: Dict[str, str] = {}
        for record in records:
            label = self.classify(record)
            if label and label.casefold() not in seen:
                seen[label.casefold()] = label
        return sort_levels(seen.values(), self.vocabulary.order)


def sort_levels(labels: Iterable[str], order: Sequence[str]) -> List[str]:
    rank = {label: index for index, label in enumerate(order)}

    def key(label: str) -> tuple[int, int, str]:
        if label in rank:
            return (0, rank[label], "")
        return (1, 0, label)

    return sorted(labels, key=key)
