import argparse
import logging
import sys
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Sequence, TextIO

from count import FileCount, count_file
from merge import merge_counters
from topk import print_topk

TOPK = 10

LOG = logging.getLogger("topk_words")


def count_files(paths: Sequence[str], max_workers: int | None = None) -> list[FileCount]:
    # One task per file, collected in argument order.
    with ProcessPoolExecutor(max_workers=max_workers) as exe:
        results = list(exe.map(count_file, paths))

    for result in results:
        if result["error"] is not None:
            LOG.error("Failed to open file %s: %s", result["path"], result["error"])

    return results


def run(paths: Sequence[str], k: int = TOPK, stream: TextIO | None = None) -> int:
    if stream is None:
        stream = sys.stdout

    start = time.perf_counter_ns()

    results = count_files(paths)
    global_counter = merge_counters(result["counter"] for result in results)
    print_topk(stream, global_counter, k)

    elapsed_us = (time.perf_counter_ns() - start) // 1_000
    print(f"Elapsed time is {elapsed_us} us", file=stream)
    return 0


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {text}")

    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="topk_words",
        description="Print the most frequent words across the given files.",
    )
    parser.add_argument("files", metavar="FILE", nargs="+", help="Text files to count")
    parser.add_argument(
        "-k",
        "--top",
        type=non_negative_int,
        default=TOPK,
        help=f"Number of words to print (default: {TOPK})",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    args = parse_args(argv)
    sys.exit(run(args.files, args.top))


if __name__ == "__main__":
    main()
