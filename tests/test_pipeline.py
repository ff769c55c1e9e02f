#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Tests for the end-to-end trimming pipeline.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import logging

import pytest

from trimgraph.errors import MalformedRecord, ParseError, UnknownSelection
from trimgraph.pipeline import TrimOptions, trim_graph, trim_graph_file
from trimgraph.utils.parallel import WorkerPool


def _tagged(lines, tag):
    return [line for line in lines if line.startswith(tag)]


class TestSelection:
    """Test trimming to a subset of paths/walks."""

    def test_single_path(self, sample_gfa_lines):
        result = trim_graph(sample_gfa_lines, ["p1"])

        assert result.lines == [
            "H\tVN:Z:1.2",
            "S\t1\tACGT",
            "S\t2\tTT",
            "S\t3\tGGA",
            "P\tp1\t1+,2-,3+\t*",
            "L\t1\t+\t2\t-\t0M",
            "L\t2\t-\t3\t+\t0M",
            "#\tcomment line",
        ]

    def test_path_with_jump(self, sample_gfa_lines):
        result = trim_graph(sample_gfa_lines, ["p2"])

        assert _tagged(result.lines, "S") == ["S\t3\tGGA", "S\t5\tAAAA", "S\t6\tCCG"]
        assert _tagged(result.lines, "L") == ["L\t5\t-\t6\t+\t0M"]
        assert _tagged(result.lines, "J") == ["J\t3\t+\t5\t-\t*"]

    def test_walk_by_name(self, sample_gfa_lines):
        result = trim_graph(sample_gfa_lines, ["NA12878#1#chr1"])

        assert _tagged(result.lines, "S") == ["S\t4\tC", "S\t5\tAAAA"]
        assert _tagged(result.lines, "W") == ["W\tNA12878\t1\tchr1\t0\t7\t>4>5"]
        assert _tagged(result.lines, "P") == []
        # The walk visits 4+ then 5+, which no link line records
        assert _tagged(result.lines, "L") == []

    def test_keep_sets_exposed(self, sample_gfa_lines):
        result = trim_graph(sample_gfa_lines, ["p1"])

        assert result.keep_sets.nodes == {"1", "2", "3"}
        assert result.keep_sets.jumps == frozenset()
        assert result.output_counts["segments"] == 3
        assert result.input_counts["segments"] == 6


class TestProperties:
    """Test invariants of the trimming transformation."""

    @pytest.mark.parametrize("names", [None, ["p1"], ["p2", "chr1"]])
    def test_idempotent(self, sample_gfa_lines, names):
        once = trim_graph(sample_gfa_lines, names).lines
        twice = trim_graph(once, names).lines

        assert twice == once

    @pytest.mark.parametrize("names", [None, ["p1"], ["p2"], ["chr1"]])
    def test_sound(self, sample_gfa_lines, names):
        """Every kept segment is used by a kept path/walk, and every kept edge joins kept segments."""
        result = trim_graph(sample_gfa_lines, names)
        segment_ids = {line.split("\t")[1] for line in _tagged(result.lines, "S")}

        assert segment_ids <= result.keep_sets.nodes
        for line in _tagged(result.lines, "L") + _tagged(result.lines, "J"):
            fields = line.split("\t")
            assert fields[1] in segment_ids and fields[3] in segment_ids

    def test_keep_all(self, sample_gfa_lines):
        result = trim_graph(sample_gfa_lines)

        assert len(_tagged(result.lines, "S")) == 6
        assert len(_tagged(result.lines, "P")) == 2
        assert len(_tagged(result.lines, "W")) == 1
        assert _tagged(result.lines, "L") == [
            "L\t1\t+\t2\t-\t0M",
            "L\t2\t-\t3\t+\t0M",
            "L\t5\t-\t6\t+\t0M",
        ]
        assert _tagged(result.lines, "J") == ["J\t3\t+\t5\t-\t*"]

    def test_keep_all_is_noop_for_fully_covered_graph(self):
        lines = [
            "S\t1\tA", "S\t2\tC", "S\t3\tG",
            "L\t1\t+\t2\t-\t0M", "L\t2\t-\t3\t-\t0M",
            "P\tp\t1+,2-,3-\t*",
        ]

        result = trim_graph(lines)

        assert result.lines == lines[:3] + lines[5:] + lines[3:5]

    @pytest.mark.parametrize("threads", [1, 2, 0])
    def test_result_independent_of_threads(self, sample_gfa_lines, threads):
        expected = trim_graph(sample_gfa_lines, ["p1", "p2"], TrimOptions(threads=1)).lines

        assert trim_graph(sample_gfa_lines, ["p1", "p2"], TrimOptions(threads=threads)).lines == expected

    def test_reversed_link_line_kept(self):
        lines = ["S\tA\tA", "S\tB\tC", "L\tB\t-\tA\t+\t0M", "P\tp\tA+,B-\t*"]

        assert "L\tB\t-\tA\t+\t0M" in trim_graph(lines).lines


class TestOptions:
    """Test the ignore flags and selection policy."""

    def test_ignore_flags(self, sample_gfa_lines):
        options = TrimOptions(ignore_segments=True, ignore_links=True, ignore_jumps=True)

        result = trim_graph(sample_gfa_lines, ["p1"], options)

        assert len(_tagged(result.lines, "S")) == 6
        assert len(_tagged(result.lines, "L")) == 5
        assert len(_tagged(result.lines, "J")) == 2
        assert _tagged(result.lines, "P") == ["P\tp1\t1+,2-,3+\t*"]

    def test_unknown_name_raises(self, sample_gfa_lines):
        with pytest.raises(UnknownSelection, match="missing"):
            trim_graph(sample_gfa_lines, ["p1", "missing"])

    def test_unknown_name_warns(self, sample_gfa_lines, caplog):
        with caplog.at_level(logging.WARNING):
            result = trim_graph(sample_gfa_lines, ["p1", "missing"], TrimOptions(unknown_selection="warn"))

        assert "missing" in caplog.text
        assert _tagged(result.lines, "P") == ["P\tp1\t1+,2-,3+\t*"]

    def test_empty_selection_drops_everything(self, sample_gfa_lines):
        result = trim_graph(sample_gfa_lines, [])

        assert result.lines == ["H\tVN:Z:1.2", "#\tcomment line"]

    def test_invalid_options(self):
        with pytest.raises(ValueError):
            TrimOptions(threads=-2)
        with pytest.raises(ValueError):
            TrimOptions(unknown_selection="ignore")

    def test_thread_count_rule_matches_pool(self):
        """TrimOptions accepts exactly the thread counts a WorkerPool accepts."""
        with pytest.raises(ValueError, match="threads must be >= 0, got -1"):
            TrimOptions(threads=-1)
        with pytest.raises(ValueError, match="threads must be >= 0, got -1"):
            WorkerPool(-1)

        assert TrimOptions(threads=0).threads == 0


class TestFailures:
    """Test that malformed input aborts the run."""

    def test_bad_path(self, sample_gfa_lines):
        with pytest.raises(ParseError):
            trim_graph(sample_gfa_lines + ["P\tbad\t1+;;2+\t*"])

    def test_unselected_bad_path_is_not_decoded(self, sample_gfa_lines):
        result = trim_graph(sample_gfa_lines + ["P\tbad\t1+;;2+\t*"], ["p1"])

        assert len(_tagged(result.lines, "P")) == 1

    def test_bad_link(self, sample_gfa_lines):
        with pytest.raises(MalformedRecord):
            trim_graph(sample_gfa_lines + ["L\t1\t+"])

    def test_no_output_on_failure(self, sample_gfa_file, temp_output_dir):
        output = temp_output_dir / "out.gfa"
        sample_gfa_file.write_text(sample_gfa_file.read_text() + "W\tx\t1\tc\t0\t1\t>1<\n")

        with pytest.raises(ParseError):
            trim_graph_file(sample_gfa_file, output)

        assert not output.exists()


class TestFiles:
    """Test the file-level wrapper."""

    def test_trim_file(self, sample_gfa_file, temp_output_dir):
        selection = temp_output_dir / "keep.txt"
        selection.write_text("p1\n")
        output = temp_output_dir / "out.gfa"

        result = trim_graph_file(sample_gfa_file, output, selection)

        assert output.read_text().splitlines() == result.lines
        assert "P\tp2\t3+;5-,6+\t*" not in result.lines

# trimgraph v0.1.0
# Any usage is subject to this software's license.
