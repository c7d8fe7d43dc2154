"""
Strategy Test Runner
====================

Bounded Context: End-to-end checks of an indexing strategy.

Flow:
    sample data -> shapes (legacy codec) -> strategy fields -> index
    test queries -> strategy query -> index search -> match concern check

Usage:
    runner = StrategyTestRunner(strategy, ctx, SpatialFieldInfo("geo"))
    runner.execute_queries(
        SpatialMatchConcern.UNORDERED_EXACT,
        "data/states-bbox.txt",
        "states-Intersects-BBox.txt",
    )
"""

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, List, Optional, TextIO, TypeVar, Union

from orbis_spatial.logging import LogEvent, StructuredLogger, create_logger
from orbis_strategy.args import SpatialArgsParser
from orbis_strategy.base import Document, FieldDescriptor, SpatialFieldInfo, SpatialStrategy
from orbis_testing.concerns import MatchFailure, SpatialMatchConcern, check_results
from orbis_testing.index import InMemoryIndex
from orbis_testing.query import SpatialTestQuery, read_test_queries
from orbis_testing.sample_data import read_sample_data

if TYPE_CHECKING:
    from orbis_spatial.context import SpatialContext

T = TypeVar("T", bound=SpatialFieldInfo)

Source = Union[str, Path, TextIO, Iterable[str]]


class StrategyTestRunner(Generic[T]):
    """
    Indexes sample data through a strategy and checks stored queries.

    Attributes:
        strategy: Strategy under test
        ctx: Context used to read sample and query shapes
        field_info: Field the strategy writes and queries
        index: Document store (defaults to a fresh InMemoryIndex)
        max_results: Result limit per query
    """

    def __init__(
        self,
        strategy: SpatialStrategy[T],
        ctx: "SpatialContext",
        field_info: T,
        index: Optional[InMemoryIndex] = None,
        args_parser: Optional[SpatialArgsParser] = None,
        max_results: int = 100,
        logger: Optional[StructuredLogger] = None,
    ):
        self.strategy = strategy
        self.ctx = ctx
        self.field_info = field_info
        self.index = index if index is not None else InMemoryIndex()
        self.args_parser = args_parser or SpatialArgsParser()
        self.max_results = max_results
        self.logger = logger or create_logger("oracle")

    def execute_queries(
        self,
        concern: SpatialMatchConcern,
        test_data: Source,
        *test_queries: Source,
    ) -> int:
        """
        Index ``test_data`` then run every query source against it.

        Returns:
            Number of queries executed

        Raises:
            MatchFailure: On the first query whose results don't match
        """
        documents = self.get_documents(test_data)
        self.index.add_documents(documents)
        self.verify_documents_indexed(len(documents))

        executed = 0
        for source in test_queries:
            with _open_lines(source) as (name, lines):
                queries = read_test_queries(self.args_parser, self.ctx, name, lines)
                executed += self.run_test_queries(queries, concern)
        return executed

    def get_documents(self, test_data: Source) -> List[Document]:
        """Turn each sample record into a Document via the strategy."""
        documents = []
        with _open_lines(test_data) as (name, lines):
            for data in read_sample_data(lines):
                document = Document()
                document.add(FieldDescriptor("id", data.id, indexed=True, stored=True))
                document.add(FieldDescriptor("name", data.name, indexed=True, stored=True))
                shape = self.ctx.shape_read_writer.read_shape(data.shape)
                for f in self.strategy.create_fields(self.field_info, shape, True, True):
                    if f is not None:  # None if incompatible geometry
                        document.add(f)
                documents.append(document)

        self.logger.info(
            event=LogEvent.ORACLE_SAMPLE_DATA_LOADED,
            message="Read sample documents",
            metadata={'source': name, 'count': len(documents)}
        )
        return documents

    def verify_documents_indexed(self, expected: int) -> None:
        actual = self.index.num_docs()
        if actual != expected:
            raise MatchFailure(f"Indexed {actual} documents, expected {expected}")

    def run_test_queries(
        self,
        queries: Iterable[SpatialTestQuery],
        concern: SpatialMatchConcern,
    ) -> int:
        """Run each query and check its result ids; returns the count run."""
        executed = 0
        for q in queries:
            query = self.strategy.make_query(q.args, self.field_info)
            got = [
                doc.get("id") for doc in self.index.search(query, self.max_results)
            ]
            try:
                check_results(concern, q.ids, got, q.line)
            except MatchFailure as e:
                self.logger.warning(
                    event=LogEvent.ORACLE_QUERY_MISMATCH,
                    message=str(e),
                    metadata={'query': str(q), 'concern': concern.value, 'got': got}
                )
                raise
            executed += 1
            self.logger.debug(
                event=LogEvent.ORACLE_QUERY_EXECUTED,
                message="Query matched",
                metadata={'query': str(q), 'results': len(got)}
            )
        return executed


@contextmanager
def _open_lines(source: Source) -> Iterator:
    """Yield (name, lines) for a path or an already-open line source."""
    if isinstance(source, (str, Path)):
        path = Path(source)
        with open(path, encoding="utf-8") as f:
            yield path.name, f
    else:
        yield getattr(source, "name", "<stream>"), source
