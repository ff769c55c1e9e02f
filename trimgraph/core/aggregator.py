#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Keep-set aggregation: decodes the retained paths and walks and reduces
their nodes, links and jumps into three global sets.

Set union is associative and commutative with the empty set as identity,
so the reduction can be computed as a parallel tree without affecting
the result.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import logging
from typing import FrozenSet, Hashable, Iterable, Sequence, TypeVar

from ..utils.parallel import WorkerPool
from .data_structures import DecodedRecord, KeepSets
from .decoder import decode_path_line, decode_walk_line

logger = logging.getLogger(__name__)

H = TypeVar('H', bound=Hashable)

EMPTY: FrozenSet = frozenset()


def _union(a: FrozenSet[H], b: FrozenSet[H]) -> FrozenSet[H]:
    return a | b


def union_all(collections: Iterable[Iterable[H]], pool: WorkerPool) -> FrozenSet[H]:
    """
    Union many collections into one frozen set.

    Each collection is converted to a set in parallel, then the sets are
    merged pairwise until one remains.
    """
    sets = pool.map(frozenset, collections)
    return pool.reduce(_union, sets, EMPTY)


def build_keep_sets(records: Sequence[DecodedRecord], pool: WorkerPool) -> KeepSets:
    """
    Reduce decoded records into the global keep-sets.

    Args:
        records: One DecodedRecord per retained path or walk
        pool: Worker pool for the run

    Returns:
        KeepSets with node ids, link edges and jump edges
    """
    return KeepSets(
        nodes=union_all((r.node_ids for r in records), pool),
        links=union_all((r.links for r in records), pool),
        jumps=union_all((r.jumps for r in records), pool),
    )


def collect_keep_sets(path_lines: Sequence[str], walk_lines: Sequence[str],
                      pool: WorkerPool) -> KeepSets:
    """
    Decode retained P and W lines and aggregate what they reference.

    Raises:
        ParseError: If any path or walk cannot be decoded
        MalformedRecord: If any P or W line is missing fields
    """
    records = pool.map(decode_path_line, path_lines)
    records.extend(pool.map(decode_walk_line, walk_lines))

    keep = build_keep_sets(records, pool)
    logger.debug(
        f"Decoded {len(path_lines)} paths and {len(walk_lines)} walks: "
        f"{len(keep.nodes)} nodes, {len(keep.links)} links, {len(keep.jumps)} jumps"
    )
    return keep

# trimgraph v0.1.0
# Any usage is subject to this software's license.
