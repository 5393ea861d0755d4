# fastswim/features/announcements.py
from __future__ import annotations
from typing import List, Sequence
from pydantic import BaseModel

from ..models.club import Announcement


class FeedStats(BaseModel):
    shown: int
    total: int
    urgent: int


def filter_announcements(items: Sequence[Announcement], *,
                         urgent_only: bool = False, query: str = "") -> List[Announcement]:
    """
    Filtre (urgent + recherche insensible à la casse sur titre/texte/auteur)
    puis trie du plus récent au plus ancien.
    """
    out = list(items)
    if urgent_only:
        out = [a for a in out if a.urgent]

    q = (query or "").strip().lower()
    if q:
        out = [a for a in out
               if q in a.title.lower() or q in a.body.lower() or q in a.author.lower()]

    # dates ISO : l'ordre lexicographique est l'ordre chronologique
    return sorted(out, key=lambda a: a.date, reverse=True)


def feed_stats(all_items: Sequence[Announcement], shown: Sequence[Announcement]) -> FeedStats:
    return FeedStats(shown=len(shown), total=len(all_items),
                     urgent=sum(1 for a in all_items if a.urgent))
