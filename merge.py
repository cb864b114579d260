from collections import Counter
from typing import Iterable, Mapping

from count import Word


def merge_counters(counters: Iterable[Mapping[Word, int]]) -> Counter[Word]:
    merged: Counter[Word] = Counter()
    for counter in counters:
        for word, count in counter.items():
            merged[word] += count

    return merged
