import pytest

from orbis_spatial import GEO, Point, Rectangle
from orbis_strategy import FieldDescriptor, SpatialArgsParser, SpatialFieldInfo, SpatialOperation, SpatialStrategy
from orbis_testing import (
    InMemoryIndex,
    MatchFailure,
    SpatialMatchConcern,
    StrategyTestRunner,
    check_results,
    read_sample_data,
    read_test_queries,
)


class PointInBoxQuery:
    def __init__(self, field_name, box):
        self.field_name = field_name
        self.box = box

    def matches(self, document):
        xy = document.get(self.field_name)
        if xy is None:
            return False
        x, y = xy
        return self.box.min_x <= x <= self.box.max_x and self.box.min_y <= y <= self.box.max_y


class PointOnlyStrategy(SpatialStrategy):
    """Indexes points only; rectangles are incompatible geometry."""

    def create_fields(self, field_info, shape, index, store):
        if isinstance(shape, Point):
            return [FieldDescriptor(field_info.field_name, (shape.x, shape.y), index, store)]
        return [None]

    def make_query(self, args, field_info):
        assert args.operation in (SpatialOperation.INTERSECTS, SpatialOperation.IS_WITHIN)
        assert isinstance(args.shape, Rectangle)
        return PointInBoxQuery(field_info.field_name, args.shape)


DATA = [
    "#id\tname\tshape",
    "P1\tOrigin\t0 0",
    "P2\tNorth east\t10 10",
    "",
    "P3\tSouth west\t-50 -50",
    "R1\tBox\t-1 -1 1 1",
]

QUERIES = [
    "P1 P2 @ Intersects(-5 -5 15 15)",
    "# comment",
    "P3 @ IsWithin(-60 -60 -40 -40)",
    "@ Intersects(100 80 120 85)",
]


@pytest.fixture
def runner():
    return StrategyTestRunner(PointOnlyStrategy(GEO), GEO, SpatialFieldInfo("geo"))


# ---- check_results ----

def test_ordered_reports_first_out_of_order_id():
    with pytest.raises(MatchFailure, match="out of order") as exc_info:
        check_results(SpatialMatchConcern.ORDERED, ["id1", "id2", "id3"], ["id3", "id1"], "q")
    assert "expected id1 but got id3" in str(exc_info.value)


def test_ordered_rejects_extra_results():
    with pytest.raises(MatchFailure, match="unexpected extra result: B"):
        check_results(SpatialMatchConcern.ORDERED, ["A"], ["A", "B"], "q")


def test_ordered_rejects_short_results():
    with pytest.raises(MatchFailure, match="expect more results than we got: B"):
        check_results(SpatialMatchConcern.ORDERED, ["A", "B"], ["A"], "q")


def test_ordered_accepts_exact_sequence():
    check_results(SpatialMatchConcern.ORDERED, ["A", "B"], ["A", "B"], "q")


def test_superset_allows_extras():
    check_results(SpatialMatchConcern.SUPERSET, ["A", "B"], ["B", "C", "A"], "q")


def test_superset_reports_missing_id():
    with pytest.raises(MatchFailure, match="Results are missing id: D"):
        check_results(SpatialMatchConcern.SUPERSET, ["A", "D"], ["A", "B", "C"], "q")


def test_unordered_exact_ignores_order():
    check_results(SpatialMatchConcern.UNORDERED_EXACT, ["C", "A", "B"], ["B", "A", "C"], "q")


def test_unordered_exact_rejects_size_difference():
    with pytest.raises(MatchFailure):
        check_results(SpatialMatchConcern.UNORDERED_EXACT, ["A", "B"], ["A", "B", "C"], "q")


def test_concern_flags():
    assert SpatialMatchConcern.ORDERED.order_is_important
    assert not SpatialMatchConcern.ORDERED.results_are_superset
    assert SpatialMatchConcern.SUPERSET.results_are_superset
    assert not SpatialMatchConcern.UNORDERED_EXACT.order_is_important
    assert not SpatialMatchConcern.UNORDERED_EXACT.results_are_superset


# ---- readers ----

def test_read_sample_data_skips_blanks_and_comments():
    records = list(read_sample_data(DATA))
    assert [r.id for r in records] == ["P1", "P2", "P3", "R1"]
    assert records[1].name == "North east"
    assert records[3].shape == "-1 -1 1 1"


def test_read_sample_data_rejects_bad_columns():
    with pytest.raises(ValueError, match="Line 1"):
        list(read_sample_data(["P1 0 0"]))


def test_read_test_queries():
    queries = list(read_test_queries(SpatialArgsParser(), GEO, "points.txt", QUERIES))
    assert [q.ids for q in queries] == [["P1", "P2"], ["P3"], []]
    assert [q.line_number for q in queries] == [1, 3, 4]
    assert queries[1].args.operation is SpatialOperation.IS_WITHIN
    assert str(queries[0]) == "points.txt:1 P1 P2 @ Intersects(-5 -5 15 15)"


def test_read_test_queries_requires_separator():
    with pytest.raises(ValueError, match="points.txt:1"):
        list(read_test_queries(SpatialArgsParser(), GEO, "points.txt", ["P1 Intersects(0 0)"]))


def test_read_test_queries_reports_bad_shape_with_line():
    with pytest.raises(ValueError, match="points.txt:1"):
        list(read_test_queries(SpatialArgsParser(), GEO, "points.txt", ["P1 @ Intersects(500 0)"]))


# ---- index ----

def test_index_search_respects_limit(runner):
    runner.index.add_documents(runner.get_documents(DATA))
    query = PointInBoxQuery("geo", GEO.make_rectangle(-180, 180, -90, 90))
    assert [d.get("id") for d in runner.index.search(query, 2)] == ["P1", "P2"]
    with pytest.raises(ValueError):
        runner.index.search(query, 0)


def test_index_clear():
    index = InMemoryIndex()
    index.add_documents([object(), object()])
    assert index.num_docs() == 2
    index.clear()
    assert index.num_docs() == 0


# ---- runner ----

def test_get_documents_skips_incompatible_fields(runner):
    documents = runner.get_documents(DATA)
    assert len(documents) == 4
    assert documents[0].get("geo") == (0, 0)
    assert documents[3].get("id") == "R1"
    assert documents[3].get("geo") is None


@pytest.mark.parametrize("concern", list(SpatialMatchConcern))
def test_execute_queries_passes(runner, concern):
    assert runner.execute_queries(concern, DATA, QUERIES) == 3
    assert runner.index.num_docs() == 4


def test_execute_queries_reads_files(runner, tmp_path):
    data_file = tmp_path / "points-data.txt"
    data_file.write_text("\n".join(DATA) + "\n", encoding="utf-8")
    query_file = tmp_path / "points-Intersects.txt"
    query_file.write_text("\n".join(QUERIES) + "\n", encoding="utf-8")

    assert runner.execute_queries(SpatialMatchConcern.ORDERED, data_file, str(query_file)) == 3


def test_execute_queries_detects_wrong_order(runner):
    bad = ["P2 P1 @ Intersects(-5 -5 15 15)"]
    with pytest.raises(MatchFailure, match="out of order"):
        runner.execute_queries(SpatialMatchConcern.ORDERED, DATA, bad)


def test_execute_queries_accepts_any_order_when_unordered(runner):
    swapped = ["P2 P1 @ Intersects(-5 -5 15 15)"]
    assert runner.execute_queries(SpatialMatchConcern.UNORDERED_EXACT, DATA, swapped) == 1


def test_verify_documents_indexed_detects_mismatch(runner):
    runner.index.add_documents(runner.get_documents(DATA))
    with pytest.raises(MatchFailure, match="Indexed 4 documents, expected 5"):
        runner.verify_documents_indexed(5)
