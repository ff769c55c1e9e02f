"""
trimgraph v0.1.0

Utility modules for trimgraph.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

from .parallel import WorkerPool, resolve_thread_count, DEFAULT_THREADS

__all__ = ["WorkerPool", "resolve_thread_count", "DEFAULT_THREADS"]
