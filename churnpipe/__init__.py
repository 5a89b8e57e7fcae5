"""Churn CSV analysis: sorting, searching, spanning trees and knapsack allocation."""

__version__ = "0.1.0"

__all__ = ["binary_search", "graph", "knapsack", "kruskal", "mergesort", "parser", "pipeline"]