#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Pytest configuration and shared fixtures.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import logging
import pytest
from pathlib import Path
import tempfile
import shutil

from trimgraph.utils.parallel import WorkerPool


SAMPLE_GFA = [
    "H\tVN:Z:1.2",
    "S\t1\tACGT",
    "S\t2\tTT",
    "S\t3\tGGA",
    "S\t4\tC",
    "S\t5\tAAAA",
    "S\t6\tCCG",
    "L\t1\t+\t2\t-\t0M",
    "L\t2\t-\t3\t+\t0M",
    "L\t3\t+\t4\t+\t0M",
    "L\t4\t+\t5\t-\t0M",
    "L\t5\t-\t6\t+\t0M",
    "J\t1\t+\t3\t+\t*",
    "J\t3\t+\t5\t-\t*",
    "P\tp1\t1+,2-,3+\t*",
    "P\tp2\t3+;5-,6+\t*",
    "W\tNA12878\t1\tchr1\t0\t7\t>4>5",
    "#\tcomment line",
]


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop stream handlers the CLI attaches to the root logger."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="trimgraph_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_gfa_lines():
    """Small graph with two paths, one walk, links and jumps."""
    return list(SAMPLE_GFA)


@pytest.fixture
def sample_gfa_file(temp_output_dir, sample_gfa_lines):
    """The sample graph written to disk."""
    path = temp_output_dir / "graph.gfa"
    path.write_text("\n".join(sample_gfa_lines) + "\n")
    return path


@pytest.fixture
def pool():
    """A two-thread worker pool."""
    with WorkerPool(threads=2) as p:
        yield p

# trimgraph v0.1.0
# Any usage is subject to this software's license.
