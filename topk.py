import heapq
from typing import Mapping, TextIO

from count import Word


def top_k(counter: Mapping[Word, int], k: int) -> list[tuple[Word, int]]:
    """Return the k most frequent words, count descending, ties by word ascending."""
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    return heapq.nsmallest(k, counter.items(), key=lambda item: (-item[1], item[0]))


def format_row(word: Word, count: int) -> str:
    return f"{count:>4d} {word.decode('utf-8', errors='backslashreplace')}"


def print_topk(stream: TextIO, counter: Mapping[Word, int], k: int) -> None:
    for word, count in top_k(counter, k):
        print(format_row(word, count), file=stream)
