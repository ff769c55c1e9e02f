"""
trimgraph v0.1.0

I/O module for trimgraph.

gfa_io.py - GFA file reading/writing, selection files, record
classification and output assembly

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

from .gfa_io import (
    GraphRecords,
    OUTPUT_ORDER,
    RECORD_TAGS,
    assemble_records,
    classify_records,
    is_gzipped,
    open_file,
    read_graph_lines,
    read_selection,
    write_graph_lines,
)

__all__ = [
    "GraphRecords",
    "OUTPUT_ORDER",
    "RECORD_TAGS",
    "assemble_records",
    "classify_records",
    "is_gzipped",
    "open_file",
    "read_graph_lines",
    "read_selection",
    "write_graph_lines",
]
