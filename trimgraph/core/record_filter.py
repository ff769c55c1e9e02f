#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Record filters: stable, parallel selection of raw GFA lines.

Segments are kept when their id is in the node keep-set; links and jumps
when their canonical edge is in the matching edge keep-set; paths and
walks when their name is in the caller's selection.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import logging
from typing import AbstractSet, Collection, List, Optional, Sequence, Set

from ..utils.parallel import WorkerPool
from .data_structures import (
    Edge,
    EdgeKind,
    NodeId,
    edge_from_line,
    path_name,
    segment_id,
    walk_names,
)

logger = logging.getLogger(__name__)


def filter_segments(lines: Sequence[str], nodes: AbstractSet[NodeId],
                    pool: WorkerPool) -> List[str]:
    """
    Keep S lines whose id is in nodes, preserving input order.

    Raises:
        MalformedRecord: If a line has no id field
    """
    return pool.filter(lambda line: segment_id(line) in nodes, lines)


def filter_edges(lines: Sequence[str], edges: AbstractSet[Edge],
                 pool: WorkerPool, kind: EdgeKind = EdgeKind.LINK) -> List[str]:
    """
    Keep L or J lines whose edge, in either endpoint order, is in edges.

    Args:
        lines: Raw L or J lines
        edges: Canonical edges to keep
        pool: Worker pool for the run
        kind: EdgeKind of the lines, used in error messages

    Raises:
        MalformedRecord: If a line is too short or has a bad orientation
    """
    record_kind = kind.name.lower()
    return pool.filter(lambda line: edge_from_line(line, record_kind) in edges, lines)


def select_paths(lines: Sequence[str], names: Optional[Collection[str]],
                 pool: WorkerPool) -> List[str]:
    """Keep P lines whose name is selected; None selects every path."""
    if names is None:
        return list(lines)
    wanted = set(names)
    return pool.filter(lambda line: path_name(line) in wanted, lines)


def select_walks(lines: Sequence[str], names: Optional[Collection[str]],
                 pool: WorkerPool) -> List[str]:
    """Keep W lines selected by seq id or PanSN name; None selects every walk."""
    if names is None:
        return list(lines)
    wanted = set(names)
    return pool.filter(lambda line: not wanted.isdisjoint(walk_names(line)), lines)


def missing_selection(names: Collection[str], path_lines: Sequence[str],
                      walk_lines: Sequence[str]) -> Set[str]:
    """Return the requested names that match no path or walk."""
    present = {path_name(line) for line in path_lines}
    for line in walk_lines:
        present.update(walk_names(line))
    return set(names) - present

# trimgraph v0.1.0
# Any usage is subject to this software's license.
