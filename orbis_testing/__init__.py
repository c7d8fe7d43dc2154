"""
Spatial Query Test Oracle
=========================

Bounded Context: Verifying indexing strategies against stored queries.

Public API
----------
    SampleData, read_sample_data: tab-separated sample documents
    SpatialTestQuery, read_test_queries: "ids @ Operation(shape)" queries
    SpatialMatchConcern, check_results, MatchFailure: result comparison
    InMemoryIndex: minimal document store
    StrategyTestRunner: end-to-end orchestration
"""

from orbis_testing.concerns import MatchFailure, SpatialMatchConcern, check_results
from orbis_testing.index import InMemoryIndex
from orbis_testing.query import SpatialTestQuery, read_test_queries
from orbis_testing.runner import StrategyTestRunner
from orbis_testing.sample_data import SampleData, read_sample_data

__all__ = [
    "MatchFailure",
    "SpatialMatchConcern",
    "check_results",
    "InMemoryIndex",
    "SpatialTestQuery",
    "read_test_queries",
    "StrategyTestRunner",
    "SampleData",
    "read_sample_data",
]
