#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Path/Walk decoder: turns the node-list field of a P line or the walk field
of a W line into an ordered sequence of oriented nodes plus the link and
jump edges between consecutive nodes.

Path strings look like '1+,2-;3+' where ',' joins contiguous neighbours
(link) and ';' marks a discontiguous hop (jump). Walk strings look like
'>1<2>3' and only ever produce links.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import logging
import re
from typing import List, Optional, Tuple

from ..errors import ParseError
from .data_structures import (
    DecodedRecord,
    Edge,
    EdgeKind,
    OrientedNode,
    orientation_from_mark,
    path_string,
    walk_string,
)

logger = logging.getLogger(__name__)

PATH_SEPARATORS = {',': EdgeKind.LINK, ';': EdgeKind.JUMP}

# Captures the separator so each token's terminator can be recovered
_PATH_SPLIT_RE = re.compile(r'([,;])')

# Visible ASCII excluding '<' and '>' (the GFA segment name alphabet)
_WALK_STEP = r'[><][!-;=?-~]+'
_WALK_STEP_RE = re.compile(r'([><])([!-;=?-~]+)')
_WALK_FULL_RE = re.compile(rf'(?:{_WALK_STEP})+')


# ============================================================================
# Path decoding
# ============================================================================

def _split_path(path: str) -> List[Tuple[str, Optional[str]]]:
    """
    Split a path string into (token, terminator) pairs.

    The terminator is ',' or ';', or None for the final token.
    """
    parts = _PATH_SPLIT_RE.split(path)
    tokens = parts[0::2]
    separators = parts[1::2] + [None]
    pairs = list(zip(tokens, separators))

    # Tolerate a single trailing separator ('1+,2+,')
    if len(pairs) > 1 and not pairs[-1][0].strip():
        pairs.pop()
    return pairs


def _decode_path_token(token: str) -> OrientedNode:
    text = token.strip()
    if any(ch.isspace() for ch in text):
        raise ParseError("Missing separator between path tokens", token)
    if len(text) < 2 or text[-1] not in '+-':
        raise ParseError("Path token must be a segment id followed by '+' or '-'", token)
    return OrientedNode(text[:-1], orientation_from_mark(text[-1]))


def decode_path(path: str) -> DecodedRecord:
    """
    Decode a comma/semicolon-separated path string.

    Args:
        path: Node-list field of a P line, e.g. '1+,2-;3+'

    Returns:
        DecodedRecord with nodes in path order. The edge between node i and
        node i+1 is a link if token i ends in ',' and a jump if it ends
        in ';'.

    Raises:
        ParseError: If the path is empty, a token has no id or orientation,
            or two tokens are not separated by ',' or ';'
    """
    if not path.strip():
        raise ParseError("Empty path string", path)

    pairs = _split_path(path)
    record = DecodedRecord()

    for i, (token, _terminator) in enumerate(pairs):
        node = _decode_path_token(token)
        if record.nodes:
            # The previous token's terminator decides how it joins this node
            prev_terminator = pairs[i - 1][1]
            edge = Edge.between(record.nodes[-1], node)
            record.edges(PATH_SEPARATORS[prev_terminator]).append(edge)
        record.nodes.append(node)

    return record


# ============================================================================
# Walk decoding
# ============================================================================

def decode_walk(walk: str) -> DecodedRecord:
    """
    Decode a '>'/'<' prefixed walk string.

    Args:
        walk: Walk field of a W line, e.g. '>1<2>3'

    Returns:
        DecodedRecord whose links join every consecutive pair of steps;
        walks never produce jumps.

    Raises:
        ParseError: If the string is not entirely made of walk steps
    """
    if not _WALK_FULL_RE.fullmatch(walk):
        raise ParseError("Malformed walk string", walk)

    record = DecodedRecord()
    for match in _WALK_STEP_RE.finditer(walk):
        node = OrientedNode(match.group(2), orientation_from_mark(match.group(1)))
        if record.nodes:
            record.links.append(Edge.between(record.nodes[-1], node))
        record.nodes.append(node)
    return record


# ============================================================================
# Record-level helpers
# ============================================================================

def decode_path_line(line: str) -> DecodedRecord:
    """Decode the node list of a P line."""
    try:
        return decode_path(path_string(line))
    except ParseError as e:
        raise ParseError(f"{e} in path line", line) from e


def decode_walk_line(line: str) -> DecodedRecord:
    """Decode the walk field of a W line."""
    try:
        return decode_walk(walk_string(line))
    except ParseError as e:
        raise ParseError(f"{e} in walk line", line) from e

# trimgraph v0.1.0
# Any usage is subject to this software's license.
