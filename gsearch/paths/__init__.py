"""Path primitives returned by the search algorithms.

- ``Path`` is the immutable result of one search call: the vertex sequence,
  its total weight and the set of vertices the search touched.
- ``PathBuilder`` is the mutable accumulator a single search call fills in
  before handing out the finished ``Path``.
"""

from gsearch.paths.path import Path, PathBuilder

__all__ = ["Path", "PathBuilder"]
