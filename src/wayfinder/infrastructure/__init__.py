"""Data loading infrastructure."""

from .loader import LoadReport, SkippedRow, load_edges, load_graph, load_nodes

__all__ = ["LoadReport", "SkippedRow", "load_edges", "load_graph", "load_nodes"]
