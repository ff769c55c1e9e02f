#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

GFA I/O: reading graph and selection files, grouping lines by record
type, and writing the regrouped output.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

from __future__ import annotations
import gzip
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ============================================================================
#                           FILE HANDLING
# ============================================================================

def is_gzipped(filepath: PathLike) -> bool:
    """Check if file is gzip compressed (by extension)."""
    return Path(filepath).suffix in ('.gz', '.gzip')


def open_file(filepath: PathLike, mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        Text file handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt', encoding='utf-8')
        return gzip.open(filepath, 'wt', encoding='utf-8')
    return open(filepath, mode, encoding='utf-8')


def read_graph_lines(filepath: PathLike) -> List[str]:
    """Read every line of a GFA file into memory, newlines stripped."""
    with open_file(filepath, 'r') as f:
        lines = [line.rstrip("\r\n") for line in f]
    logger.info(f"Read {len(lines)} lines from {filepath}")
    return lines


def read_selection(filepath: PathLike) -> List[str]:
    """
    Read path/walk names to keep, one per line.

    Blank lines and lines starting with '#' are ignored.
    """
    with open_file(filepath, 'r') as f:
        names = [
            line.strip() for line in f
            if line.strip() and not line.lstrip().startswith('#')
        ]
    logger.info(f"Read {len(names)} path/walk names from {filepath}")
    return names


def write_graph_lines(lines: Iterable[str], filepath: Optional[PathLike] = None):
    """Write lines to filepath, or to stdout when filepath is None."""
    if filepath is None:
        _write_lines(lines, sys.stdout)
        sys.stdout.flush()
        return

    with open_file(filepath, 'w') as f:
        _write_lines(lines, f)
    logger.info(f"Wrote trimmed graph to {filepath}")


def _write_lines(lines: Iterable[str], handle: TextIO):
    for line in lines:
        handle.write(line)
        handle.write('\n')


# ============================================================================
#                       RECORD CLASSIFICATION
# ============================================================================

# Leading tag character -> GraphRecords attribute
RECORD_TAGS = {
    'H': 'headers',
    'S': 'segments',
    'L': 'links',
    'J': 'jumps',
    'P': 'paths',
    'W': 'walks',
}

# Order in which groups are written back out
OUTPUT_ORDER = ('headers', 'segments', 'paths', 'walks', 'links', 'jumps', 'other')


@dataclass
class GraphRecords:
    """Raw GFA lines grouped by record type, each in input order."""
    headers: List[str] = field(default_factory=list)
    segments: List[str] = field(default_factory=list)
    links: List[str] = field(default_factory=list)
    jumps: List[str] = field(default_factory=list)
    paths: List[str] = field(default_factory=list)
    walks: List[str] = field(default_factory=list)
    other: List[str] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        """Number of lines in each group."""
        return {name: len(getattr(self, name)) for name in OUTPUT_ORDER}


def classify_records(lines: Iterable[str]) -> GraphRecords:
    """Group lines by their leading tag character; untagged lines go to 'other'."""
    records = GraphRecords()
    for line in lines:
        bucket = RECORD_TAGS.get(line[:1], 'other')
        getattr(records, bucket).append(line)
    return records


def assemble_records(records: GraphRecords) -> List[str]:
    """Concatenate the groups in output order."""
    output: List[str] = []
    for name in OUTPUT_ORDER:
        output.extend(getattr(records, name))
    return output

# trimgraph v0.1.0
# Any usage is subject to this software's license.
