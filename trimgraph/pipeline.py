#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Trimming pipeline.

Stages, each a pure function of the previous one:

    raw lines -> classified records -> selected paths/walks
              -> keep-sets -> filtered records -> assembled output

Any failure aborts the run before output is produced.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .core.aggregator import collect_keep_sets
from .core.data_structures import EdgeKind, KeepSets
from .core.record_filter import (
    filter_edges,
    filter_segments,
    missing_selection,
    select_paths,
    select_walks,
)
from .errors import UnknownSelection
from .io.gfa_io import (
    GraphRecords,
    assemble_records,
    classify_records,
    read_graph_lines,
    read_selection,
    write_graph_lines,
)
from .utils.parallel import DEFAULT_THREADS, WorkerPool, resolve_thread_count

logger = logging.getLogger(__name__)

UNKNOWN_SELECTION_POLICIES = ('error', 'warn')


@dataclass
class TrimOptions:
    """Static configuration for one trimming run."""
    threads: int = DEFAULT_THREADS  # 0 = all available cores
    ignore_segments: bool = False  # Keep every S line
    ignore_links: bool = False  # Keep every L line
    ignore_jumps: bool = False  # Keep every J line
    unknown_selection: str = 'error'  # 'error' or 'warn'

    def __post_init__(self):
        """Validate options."""
        resolve_thread_count(self.threads)
        if self.unknown_selection not in UNKNOWN_SELECTION_POLICIES:
            raise ValueError(
                f"unknown_selection must be one of {UNKNOWN_SELECTION_POLICIES}, "
                f"got {self.unknown_selection!r}"
            )


@dataclass
class TrimResult:
    """Output of a trimming run."""
    lines: List[str]
    keep_sets: KeepSets
    input_counts: Dict[str, int] = field(default_factory=dict)
    output_counts: Dict[str, int] = field(default_factory=dict)

    def summary(self) -> str:
        """One line per record group: kept/total."""
        return "\n".join(
            f"  {name}: {self.output_counts.get(name, 0)}/{count}"
            for name, count in self.input_counts.items()
        )


def _check_selection(kept_names: Sequence[str], records: GraphRecords, policy: str):
    missing = missing_selection(kept_names, records.paths, records.walks)
    if not missing:
        return
    if policy == 'error':
        raise UnknownSelection(missing)
    for name in sorted(missing):
        logger.warning(f"Requested path/walk not found in graph: {name}")


def trim_graph(lines: Sequence[str], kept_names: Optional[Sequence[str]] = None,
               options: Optional[TrimOptions] = None) -> TrimResult:
    """
    Reduce a GFA graph to the sub-graph used by the selected paths and walks.

    Args:
        lines: GFA lines, newlines stripped
        kept_names: Path/walk names to keep (None = keep all)
        options: Run options (defaults if None)

    Returns:
        TrimResult with the regrouped, filtered lines

    Raises:
        ParseError: A retained path or walk cannot be decoded
        MalformedRecord: A record has too few fields
        UnknownSelection: A requested name is absent and policy is 'error'
    """
    options = options or TrimOptions()
    start_time = time.time()

    records = classify_records(lines)
    input_counts = records.counts()

    if kept_names is not None:
        _check_selection(kept_names, records, options.unknown_selection)

    with WorkerPool(options.threads) as pool:
        logger.info("Filtering paths")
        paths = select_paths(records.paths, kept_names, pool)
        walks = select_walks(records.walks, kept_names, pool)

        logger.info("Getting nodes/edges to keep")
        keep = collect_keep_sets(paths, walks, pool)

        segments = records.segments
        if not options.ignore_segments:
            logger.info("Removing nodes")
            segments = filter_segments(segments, keep.nodes, pool)

        links = records.links
        if not options.ignore_links:
            logger.info("Removing links")
            links = filter_edges(links, keep.edges(EdgeKind.LINK), pool, EdgeKind.LINK)

        jumps = records.jumps
        if not options.ignore_jumps:
            logger.info("Removing jumps")
            jumps = filter_edges(jumps, keep.edges(EdgeKind.JUMP), pool, EdgeKind.JUMP)

    trimmed = GraphRecords(
        headers=records.headers,
        segments=segments,
        links=links,
        jumps=jumps,
        paths=paths,
        walks=walks,
        other=records.other,
    )
    result = TrimResult(
        lines=assemble_records(trimmed),
        keep_sets=keep,
        input_counts=input_counts,
        output_counts=trimmed.counts(),
    )

    runtime = time.time() - start_time
    logger.info(f"Trimmed graph in {runtime:.3f}s (kept/total):\n{result.summary()}")
    return result


def trim_graph_file(graph_path: Union[str, Path],
                    output_path: Optional[Union[str, Path]] = None,
                    selection_path: Optional[Union[str, Path]] = None,
                    options: Optional[TrimOptions] = None) -> TrimResult:
    """
    Trim a GFA file and write the result.

    Args:
        graph_path: Input GFA (optionally gzipped)
        output_path: Output file (None = stdout)
        selection_path: File of path/walk names to keep (None = keep all)
        options: Run options

    Returns:
        TrimResult of the run
    """
    lines = read_graph_lines(graph_path)
    kept_names = read_selection(selection_path) if selection_path else None

    result = trim_graph(lines, kept_names, options)
    write_graph_lines(result.lines, output_path)
    return result

# trimgraph v0.1.0
# Any usage is subject to this software's license.
