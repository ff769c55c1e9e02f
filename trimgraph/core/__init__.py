"""
trimgraph v0.1.0

Core trimming logic: path/walk decoding, keep-set aggregation and record
filtering.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

from .data_structures import (
    NodeId,
    Orientation,
    OrientedNode,
    Edge,
    EdgeKind,
    DecodedRecord,
    KeepSets,
    edge_from_line,
    path_name,
    segment_id,
    walk_names,
)
from .decoder import decode_path, decode_walk, decode_path_line, decode_walk_line
from .aggregator import union_all, build_keep_sets, collect_keep_sets
from .record_filter import (
    filter_segments,
    filter_edges,
    select_paths,
    select_walks,
    missing_selection,
)

__all__ = [
    "NodeId",
    "Orientation",
    "OrientedNode",
    "Edge",
    "EdgeKind",
    "DecodedRecord",
    "KeepSets",
    "edge_from_line",
    "path_name",
    "segment_id",
    "walk_names",
    "decode_path",
    "decode_walk",
    "decode_path_line",
    "decode_walk_line",
    "union_all",
    "build_keep_sets",
    "collect_keep_sets",
    "filter_segments",
    "filter_edges",
    "select_paths",
    "select_walks",
    "missing_selection",
]
