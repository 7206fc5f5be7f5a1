"""Graph front-ends for the search algorithms.

This package provides the `AbstractGraph` base class with its closure-backed
`FunctionGraph` variant, and `NxGraph`, an adapter over existing NetworkX
graphs (`nx`).
"""

from gsearch.graph.abstract_graph import AbstractGraph, FunctionGraph
from gsearch.graph.nx import NxGraph

__all__ = ["AbstractGraph", "FunctionGraph", "NxGraph"]
