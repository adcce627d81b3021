import heapq
from typing import Dict, Iterable, List, Tuple

from .tokenizer import count_words


class _HeapEntry(object):
    """Heap item whose minimum is the next one to evict.

    Smaller counts come first; among equal counts the alphabetically later
    word comes first, so earlier words survive a tie at capacity.
    """
    __slots__ = ('count', 'word')

    def __init__(self, count, word):
        self.count = count
        self.word = word

    def __lt__(self, other):
        if self.count != other.count:
            return self.count < other.count
        return self.word > other.word


def _display_key(item):
    word, count = item
    return (-count, word)


def select_top_k(frequencies: Dict[str, int], k: int) -> List[Tuple[str, int]]:
    """
    Return the ``k`` most frequent ``(word, count)`` pairs of ``frequencies``,
    ordered by count descending and then word ascending.

    Keeps a min-heap bounded to ``k`` entries, so the selection costs
    O(u log k) for u distinct words plus O(k log k) for the final sort.
    """
    if k <= 0 or not frequencies:
        return []
    heap: List[_HeapEntry] = []
    for word, count in frequencies.items():
        heapq.heappush(heap, _HeapEntry(count, word))
        if len(heap) > k:
            heapq.heappop(heap)
    items = [(entry.word, entry.count) for entry in heap]
    items.sort(key=_display_key)
    return items


def top_k_words(lines: Iterable[str], k: int) -> List[Tuple[str, int]]:
    if k <= 0 or not lines:
        return []
    return select_top_k(count_words(lines), k)
