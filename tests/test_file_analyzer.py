from csvshelf.services.file_analyzer import file_analyzer
from csvshelf.services.file_parser import TabularData, parse_bytes


def test_column_stats():
    table = parse_bytes(b"name,city\nkim,Seoul\nlee,\npark,Seoul\n")
    result = file_analyzer.analyze(table)

    assert result.columns == ["name", "city"]
    assert result.total_rows == 3
    assert result.ragged_rows == 0

    name, city = result.column_stats
    assert name.non_empty_count == 3
    assert name.unique_count == 3
    assert name.sample_values == ["kim", "lee", "park"]
    assert city.empty_count == 1
    assert city.unique_count == 1
    assert city.sample_values == ["Seoul"]


def test_duplicate_columns_analyzed_by_position():
    table = TabularData(columns=["id", "id"], rows=[["1", ""], ["2", "x"]])
    result = file_analyzer.analyze(table)

    first, second = result.column_stats
    assert (first.column_name, first.non_empty_count) == ("id", 2)
    assert (second.column_name, second.non_empty_count) == ("id", 1)


def test_ragged_rows_are_padded_and_counted():
    table = TabularData(columns=["a", "b"], rows=[["1"], ["1", "2", "3"], ["4", "5"]])
    result = file_analyzer.analyze(table)

    assert result.total_rows == 3
    assert result.ragged_rows == 2
    assert result.column_stats[1].empty_count == 1


def test_sample_values_limited():
    rows = [[str(i)] for i in range(20)]
    result = file_analyzer.analyze(TabularData(columns=["n"], rows=rows))

    assert result.column_stats[0].sample_values == ["0", "1", "2", "3", "4"]


def test_empty_table():
    result = file_analyzer.analyze(TabularData())

    assert result.columns == []
    assert result.column_stats == []
    assert result.total_rows == 0


def test_header_only_table():
    result = file_analyzer.analyze(TabularData(columns=["a", "b"], rows=[]))

    assert result.total_rows == 0
    assert [s.total_rows for s in result.column_stats] == [0, 0]


def test_sample_count_above_default():
    rows = [[str(i)] for i in range(10)]
    result = file_analyzer.analyze(TabularData(columns=["v"], rows=rows), sample_count=8)

    assert result.column_stats[0].sample_values == [str(i) for i in range(8)]
