from collections import Counter
from typing import BinaryIO, Iterable, TypeAlias, TypedDict

Word: TypeAlias = bytes


class FileCount(TypedDict):
    path: str
    counter: Counter[Word]
    error: str | None


def tolower(token: bytes) -> Word:
    # bytes.lower() only folds A-Z; everything else passes through.
    return token.lower()


def count_words(stream: BinaryIO | Iterable[bytes]) -> Counter[Word]:
    counter: Counter[Word] = Counter()
    for line in stream:
        # Splits on runs of b" \t\n\r\v\f".
        counter.update(map(tolower, line.split()))

    return counter


def count_file(path: str) -> FileCount:
    try:
        with open(path, "rb") as file:
            counter = count_words(file)
    except OSError as exc:
        return {"path": path, "counter": Counter(), "error": exc.strerror or str(exc)}

    return {"path": path, "counter": counter, "error": None}
