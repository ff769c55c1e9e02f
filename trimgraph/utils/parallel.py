#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Worker pool for the data-parallel stages of a trimming run.

Work is split into chunks and submitted to a ThreadPoolExecutor. map and
filter return results in input order; reduce merges partial results
pairwise in rounds, so it requires an associative merge function.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

DEFAULT_THREADS = 4


def resolve_thread_count(threads: Optional[int] = None) -> int:
    """
    Resolve a requested thread count.

    Args:
        threads: Requested threads (None = default of 4, 0 = all cores)

    Returns:
        Number of worker threads to start
    """
    if threads is None:
        return DEFAULT_THREADS
    if threads < 0:
        raise ValueError(f"threads must be >= 0, got {threads}")
    if threads == 0:
        return os.cpu_count() or 1
    return threads


class WorkerPool:
    """
    Fixed-size thread pool scoped to a single run.

    Use as a context manager:

        with WorkerPool(threads=8) as pool:
            kept = pool.filter(predicate, lines)
    """

    def __init__(self, threads: Optional[int] = DEFAULT_THREADS):
        self.num_threads = resolve_thread_count(threads)
        self._executor: Optional[ThreadPoolExecutor] = None

    def __enter__(self) -> 'WorkerPool':
        self._executor = ThreadPoolExecutor(
            max_workers=self.num_threads, thread_name_prefix='trimgraph'
        )
        logger.info(f"Running trimgraph on {self.num_threads} threads")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Shut down the worker threads."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _chunks(self, items: Sequence[T]) -> List[Sequence[T]]:
        # Roughly four chunks per worker keeps threads busy on uneven input
        chunk_size = max(1, -(-len(items) // (self.num_threads * 4)))
        return [items[i:i + chunk_size] for i in range(0, len(items), chunk_size)]

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
        """
        Apply fn to every item in parallel.

        Returns:
            Results in the same order as items

        Raises:
            Whatever fn raises; the first failing chunk aborts the call
        """
        items = list(items)
        if not items:
            return []
        if self._executor is None:
            raise RuntimeError("WorkerPool must be entered before use")

        def run_chunk(chunk: Sequence[T]) -> List[R]:
            return [fn(item) for item in chunk]

        results: List[R] = []
        for chunk_result in self._executor.map(run_chunk, self._chunks(items)):
            results.extend(chunk_result)
        return results

    def filter(self, predicate: Callable[[T], bool], items: Iterable[T]) -> List[T]:
        """Return the items for which predicate is true, in input order."""
        items = list(items)
        mask = self.map(predicate, items)
        return [item for item, keep in zip(items, mask) if keep]

    def reduce(self, fn: Callable[[R, R], R], items: Iterable[R], identity: R) -> R:
        """
        Combine items with an associative function as a parallel tree reduction.

        Args:
            fn: Associative merge function
            items: Partial results to combine
            identity: Identity element of fn, returned for empty input

        Returns:
            The combined value
        """
        level = list(items)
        if not level:
            return identity
        while len(level) > 1:
            pairs = [level[i:i + 2] for i in range(0, len(level), 2)]
            level = self.map(
                lambda pair: fn(pair[0], pair[1]) if len(pair) == 2 else pair[0],
                pairs,
            )
        return level[0]

    def __repr__(self) -> str:
        return f"WorkerPool(threads={self.num_threads})"

# trimgraph v0.1.0
# Any usage is subject to this software's license.
