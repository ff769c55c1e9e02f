#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Core data structures for graph trimming: oriented nodes, canonical edges,
decoded path/walk records, keep-sets, and the tab-delimited field accessors
used to read node and edge references out of raw GFA lines.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, NamedTuple, Tuple

from ..errors import MalformedRecord

NodeId = str
Orientation = bool

# Minimum number of tab-delimited fields each record kind must carry
SEGMENT_MIN_FIELDS = 2
EDGE_MIN_FIELDS = 5
PATH_MIN_FIELDS = 3
WALK_MIN_FIELDS = 7

FORWARD_MARKS = ('+', '>')
REVERSE_MARKS = ('-', '<')


# ============================================================================
# Part 1: Oriented nodes and edges
# ============================================================================

class EdgeKind(Enum):
    """Adjacency kind between two consecutive oriented nodes."""
    LINK = 'L'  # Contiguous adjacency (',' in paths, every walk step)
    JUMP = 'J'  # Discontiguous hop (';' in paths)


def orientation_from_mark(mark: str) -> Orientation:
    """
    Convert a GFA orientation mark ('+', '-', '>', '<') to an Orientation.

    Raises:
        ValueError: If the mark is not a recognised orientation character
    """
    if mark in FORWARD_MARKS:
        return True
    if mark in REVERSE_MARKS:
        return False
    raise ValueError(f"Invalid orientation mark: {mark!r}")


class OrientedNode(NamedTuple):
    """A node occurrence within a path or walk."""
    node_id: NodeId
    forward: Orientation


class Edge(NamedTuple):
    """
    Adjacency between two oriented nodes.

    Edges are compared without regard to endpoint order: (A, B) and (B, A)
    are the same edge. Endpoint orientations are kept as they are and never
    flipped. Instances should be built with Edge.between(), which stores the
    smaller endpoint first so that equal edges hash identically.
    """
    first: OrientedNode
    second: OrientedNode

    @classmethod
    def between(cls, a: OrientedNode, b: OrientedNode) -> 'Edge':
        """Build the canonical edge joining two oriented nodes."""
        if b < a:
            a, b = b, a
        return cls(a, b)


# ============================================================================
# Part 2: Decoded records and keep-sets
# ============================================================================

@dataclass
class DecodedRecord:
    """
    Nodes and edges traversed by a single path or walk.

    nodes preserves the traversal order and any repeated visits; links and
    jumps list edges in the order they were encountered.
    """
    nodes: List[OrientedNode] = field(default_factory=list)
    links: List[Edge] = field(default_factory=list)
    jumps: List[Edge] = field(default_factory=list)

    @property
    def node_ids(self) -> List[NodeId]:
        """Node ids in traversal order, orientation dropped."""
        return [node.node_id for node in self.nodes]

    def edges(self, kind: EdgeKind) -> List[Edge]:
        """Return the edges of the given kind."""
        return self.links if kind is EdgeKind.LINK else self.jumps


@dataclass(frozen=True)
class KeepSets:
    """Global sets of nodes and edges referenced by the retained paths/walks."""
    nodes: FrozenSet[NodeId] = frozenset()
    links: FrozenSet[Edge] = frozenset()
    jumps: FrozenSet[Edge] = frozenset()

    def edges(self, kind: EdgeKind) -> FrozenSet[Edge]:
        """Return the edge keep-set for the given kind."""
        return self.links if kind is EdgeKind.LINK else self.jumps


# ============================================================================
# Part 3: Field accessors for raw record lines
# ============================================================================

def split_fields(line: str, minimum: int, kind: str) -> List[str]:
    """
    Split a record line on tabs, requiring at least `minimum` fields.

    Args:
        line: Raw record line (no trailing newline)
        minimum: Required number of fields
        kind: Record kind used in the error message ('segment', 'link', ...)

    Returns:
        List of fields

    Raises:
        MalformedRecord: If the line has fewer fields than required
    """
    fields = line.split('\t')
    if len(fields) < minimum:
        raise MalformedRecord(
            f"{kind} record has {len(fields)} field(s), expected at least {minimum}",
            line,
        )
    return fields


def segment_id(line: str) -> NodeId:
    """Return the node id of an S line."""
    return split_fields(line, SEGMENT_MIN_FIELDS, 'segment')[1]


def path_name(line: str) -> str:
    """Return the name of a P line."""
    return split_fields(line, PATH_MIN_FIELDS, 'path')[1]


def path_string(line: str) -> str:
    """Return the node-list field of a P line."""
    return split_fields(line, PATH_MIN_FIELDS, 'path')[2]


def walk_string(line: str) -> str:
    """Return the walk field of a W line."""
    return split_fields(line, WALK_MIN_FIELDS, 'walk')[6]


def walk_names(line: str) -> Tuple[str, str]:
    """
    Return the names a W line can be selected by.

    A walk is addressable either by its sequence id (field 3) or by its
    PanSN-style name 'sample#haplotype#seqid'.
    """
    fields = split_fields(line, WALK_MIN_FIELDS, 'walk')
    sample, hap_index, seq_id = fields[1], fields[2], fields[3]
    return seq_id, f"{sample}#{hap_index}#{seq_id}"


def edge_from_line(line: str, kind: str = 'link') -> Edge:
    """
    Build the canonical edge referenced by an L or J line.

    Raises:
        MalformedRecord: If the line is too short or an orientation field is
            not '+' or '-'
    """
    fields = split_fields(line, EDGE_MIN_FIELDS, kind)
    ends = []
    for id_idx, orient_idx in ((1, 2), (3, 4)):
        mark = fields[orient_idx]
        if mark not in ('+', '-'):
            raise MalformedRecord(f"{kind} record has invalid orientation {mark!r}", line)
        ends.append(OrientedNode(fields[id_idx], orientation_from_mark(mark)))
    return Edge.between(ends[0], ends[1])

# trimgraph v0.1.0
# Any usage is subject to this software's license.
