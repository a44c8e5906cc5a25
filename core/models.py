"""Result payloads and the tab selector shared by the screens."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import List, Tuple


class Tab(str, Enum):
    HOME = "home"
    SEARCH = "search"
    DOCUMENT = "document"
    RISK = "risk"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]


TAB_LABELS = {
    Tab.HOME: "Home",
    Tab.SEARCH: "Search",
    Tab.DOCUMENT: "Documents",
    Tab.RISK: "Risk",
}


@dataclass(frozen=True)
class Source:
    title: str
    url: str
    excerpt: str


@dataclass(frozen=True)
class SearchResult:
    answer: str
    sources: Tuple[Source, ...]

    def paragraphs(self) -> List[str]:
        return [p.strip() for p in self.answer.split("\n\n") if p.strip()]

    def to_dict(self) -> dict:
        return {
            "answer": self.answer,
            "sources": [asdict(s) for s in self.sources],
        }


@dataclass(frozen=True)
class SummaryResult:
    bullet_points: Tuple[str, ...]
    verdict: str

    def to_dict(self) -> dict:
        return {
            "bullet_points": list(self.bullet_points),
            "verdict": self.verdict,
        }
