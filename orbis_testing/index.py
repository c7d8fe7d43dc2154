"""
In-Memory Index
===============

Minimal document store for running test queries. Matching is delegated
entirely to the strategy's Query objects; results come back in insertion
order.

Threading: writes take a lock, reads work on a snapshot.
"""

import threading
from typing import Iterable, List

from orbis_strategy.base import Document, Query


class InMemoryIndex:
    """List-backed index of Documents."""

    def __init__(self):
        self._documents: List[Document] = []
        self._lock = threading.Lock()

    def add_documents(self, documents: Iterable[Document]) -> None:
        with self._lock:
            self._documents.extend(documents)

    def num_docs(self) -> int:
        return len(self._documents)

    def search(self, query: Query, limit: int) -> List[Document]:
        """First ``limit`` documents the query matches, in insertion order."""
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")
        results = []
        for document in list(self._documents):
            if query.matches(document):
                results.append(document)
                if len(results) >= limit:
                    break
        return results

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()
