from collections import Counter
from typing import Iterable, Sequence

from app.memos.models import Memo
from app.memos.schemas import MemoStats

ALL = "all"

def matches(memo: Memo, query: str) -> bool:
    q = query.lower()
    return (
        q in memo.title.lower()
        or q in memo.content.lower()
        or any(q in t.lower() for t in memo.tags)
    )

def filter_memos(memos: Iterable[Memo], query: str | None = None, category: str | None = None) -> list[Memo]:
    """Category first, then case-insensitive text match on title, content or any tag."""
    items = list(memos)
    if category and category != ALL:
        items = [m for m in items if m.category == category]
    if query and query.strip():
        items = [m for m in items if matches(m, query.strip())]
    return items

def memo_stats(all_memos: Sequence[Memo], filtered: Sequence[Memo]) -> MemoStats:
    by_category = Counter(m.category for m in all_memos)
    return MemoStats(total=len(all_memos), by_category=dict(by_category), filtered=len(filtered))
