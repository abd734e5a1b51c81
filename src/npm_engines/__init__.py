"""npm-engines-check core package.

Checks that a project's declared minimum Node.js version is accepted by the
``engines.node`` constraints of every locked dependency, and computes the
version window the dependency set allows. The range algebra lives in
:mod:`npm_engines.algebra`; :mod:`npm_engines.core` is callable from both the
CLI and a GitHub Action wrapper.
"""

from __future__ import annotations

from .algebra import dedupe_ranges, intersect_ranges, reduce_intersection, simplify
from .core import check_project, check_repository

__all__ = [
    "check_project",
    "check_repository",
    "dedupe_ranges",
    "intersect_ranges",
    "reduce_intersection",
    "simplify",
]
