#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Exceptions raised while trimming a graph.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

from typing import Iterable, Optional


class TrimGraphError(Exception):
    """Base class for all errors that abort a trimming run."""
    pass


class ParseError(TrimGraphError):
    """Raised when a path or walk token cannot be decoded into an oriented node."""

    def __init__(self, message: str, text: Optional[str] = None):
        if text is not None:
            message = f"{message}: {text!r}"
        super().__init__(message)
        self.text = text


class MalformedRecord(TrimGraphError):
    """Raised when a record line does not match the expected tab-delimited layout."""

    def __init__(self, message: str, line: Optional[str] = None):
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)
        self.line = line


class UnknownSelection(TrimGraphError):
    """Raised when requested path/walk names are not present in the graph."""

    def __init__(self, names: Iterable[str]):
        self.names = sorted(names)
        super().__init__(
            f"{len(self.names)} requested path/walk name(s) not found in graph: "
            + ", ".join(self.names)
        )

# trimgraph v0.1.0
# Any usage is subject to this software's license.
