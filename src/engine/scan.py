"""
Embedded-substring scan over the full word list.

Trie walks only see continuations at the very start or end of a word. This
scan finds every occurrence of the answer anywhere inside a word, e.g.
"an" inside "band" allows prepending "b" and appending "d".

The word list is split into contiguous partitions, one per worker. Each
worker builds its own ScanResult and shares nothing; the results are merged
in the calling thread after all workers have finished. Set union and
boolean OR make the merged result independent of partition count and
completion order.

The scan itself is pure Python, so a thread pool keeps it correct and
cheap to start but does not run partitions in parallel under the GIL.
Select the "process" executor to spread a large corpus across CPUs; each
partition is then pickled to its worker.
"""

import concurrent.futures
import logging
import os
from typing import Iterable, List, Optional, Sequence

from .models import ExecutorKind, ScanResult

logger = logging.getLogger(__name__)


def default_workers() -> int:
    """One worker per available CPU."""
    return os.cpu_count() or 1


def partition(words: Sequence[str], parts: int) -> List[Sequence[str]]:
    """Split ``words`` into at most ``parts`` contiguous, non-empty slices."""
    if not words:
        return []
    parts = max(1, min(parts, len(words)))
    size = -(-len(words) // parts)  # ceiling division
    return [words[i:i + size] for i in range(0, len(words), size)]


def scan_partition(words: Iterable[str], answer: str) -> ScanResult:
    """
    Scan one partition for occurrences of ``answer`` at any offset.

    Records the character before each occurrence (unless it starts the word)
    and the character after it (unless it ends the word).
    """
    prefix_letters = set()
    suffix_letters = set()
    found = False
    n = len(answer)

    for word in words:
        idx = word.find(answer)
        while idx >= 0:
            found = True
            if idx > 0:
                prefix_letters.add(word[idx - 1])
            end = idx + n
            if end < len(word):
                suffix_letters.add(word[end])
            idx = word.find(answer, idx + 1)

    return ScanResult(
        prefix_letters=frozenset(prefix_letters),
        suffix_letters=frozenset(suffix_letters),
        found=found,
    )


def merge_results(results: Iterable[ScanResult]) -> ScanResult:
    """Union the letter sets and OR the found flags."""
    prefix_letters = set()
    suffix_letters = set()
    found = False
    for result in results:
        prefix_letters |= result.prefix_letters
        suffix_letters |= result.suffix_letters
        found = found or result.found

    return ScanResult(
        prefix_letters=frozenset(prefix_letters),
        suffix_letters=frozenset(suffix_letters),
        found=found,
    )


def _make_executor(kind: ExecutorKind, workers: int) -> concurrent.futures.Executor:
    if kind == "process":
        return concurrent.futures.ProcessPoolExecutor(max_workers=workers)
    return concurrent.futures.ThreadPoolExecutor(max_workers=workers)


def scan_embedded(
    words: Sequence[str],
    answer: str,
    workers: Optional[int] = None,
    executor: ExecutorKind = "thread",
) -> ScanResult:
    """
    Fan the scan out over ``workers`` partitions and merge the results.

    Args:
        words: Full word list (duplicates allowed)
        answer: Non-empty string to look for
        workers: Number of partitions; defaults to the CPU count
        executor: "thread" (no CPU parallelism under the GIL) or "process"

    Returns:
        The merged ScanResult
    """
    if not answer:
        raise ValueError("Embedded scan needs a non-empty answer")

    workers = workers or default_workers()
    parts = partition(words, workers)
    if len(parts) <= 1:
        return merge_results(scan_partition(p, answer) for p in parts)

    logger.debug("Scanning %d words for %r across %d workers", len(words), answer, len(parts))

    with _make_executor(executor, len(parts)) as pool:
        futures = [pool.submit(scan_partition, p, answer) for p in parts]
        done, _ = concurrent.futures.wait(futures, return_when=concurrent.futures.ALL_COMPLETED)
        # result() re-raises any worker failure here, in the caller
        return merge_results(f.result() for f in done)
