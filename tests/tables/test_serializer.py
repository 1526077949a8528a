"""Unit tests for serialize_table, column widths, and CSV export."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from md_sheet.tables.grammar import parse_alignments, parse_row
from md_sheet.tables.parser import parse_document
from md_sheet.tables.serializer import column_widths, serialize_table, table_lines, table_to_csv

# ===========================================================================
# column_widths tests
# ===========================================================================


class TestColumnWidths:

    def test_minimum_width_is_three(self, table_factory):
        table = table_factory(["A", "B"], [["1", "2"]])
        assert column_widths(table) == [3, 3]

    def test_header_sets_width(self, table_factory):
        table = table_factory(["Name", "B"], [["x", "y"]])
        assert column_widths(table) == [4, 3]

    def test_longest_cell_sets_width(self, table_factory):
        table = table_factory(["A", "B"], [["apple", "2"], ["kiwi", "12345678"]])
        assert column_widths(table) == [5, 8]


# ===========================================================================
# serialize_table tests
# ===========================================================================


class TestSerializeTable:

    def test_basic_table(self, table_factory):
        table = table_factory(["A", "B"], [["1", "2"]])
        assert serialize_table(table) == "| A   | B   |\n| ----| ----|\n| 1   | 2   |\n"

    def test_trailing_newline(self, two_by_two):
        assert serialize_table(two_by_two).endswith("|\n")

    def test_left_and_right_alignment(self, table_factory):
        table = table_factory(["Name", "Qty"], [["apple", "3"]], alignments=["left", "right"])
        assert serialize_table(table) == "| Name  | Qty |\n|:------| ---:|\n| apple | 3   |\n"

    def test_center_alignment(self, table_factory):
        table = table_factory(["Mid"], [["x"]], alignments=["center"])
        assert table_lines(table)[1] == "|:---:|"

    def test_none_alignment_extra_dash(self, table_factory):
        table = table_factory(["Wide"], [], alignments=["none"])
        assert table_lines(table)[1] == "| -----|"

    def test_left_alignment_extra_dash(self, table_factory):
        table = table_factory(["Wide"], [], alignments=["left"])
        assert table_lines(table)[1] == "|:-----|"

    def test_table_without_rows(self, table_factory):
        table = table_factory(["A"], [])
        assert serialize_table(table) == "| A   |\n| ----|\n"

    def test_empty_cells_are_padded(self, table_factory):
        table = table_factory(["A", "B"], [["", "x"]])
        assert table_lines(table)[2] == "|     | x   |"

    def test_all_lines_same_length(self, table_factory):
        table = table_factory(
            ["Item", "Quantity", "Note"],
            [["apple", "3", ""], ["a much longer item", "12", "n"]],
            alignments=["left", "right", "center"],
        )
        lengths = {len(line) for line in table_lines(table)}
        assert len(lengths) == 1

    def test_pipe_count_matches_columns(self, table_factory):
        table = table_factory(["A", "B", "C"], [["1", "2", "3"], ["", "", ""]], alignments=["left", "none", "right"])
        for line in table_lines(table):
            assert line.count("|") == len(table.headers) + 1


# ===========================================================================
# serialize -> parse consistency
# ===========================================================================


class TestSerializeParseConsistency:

    def test_header_row_recovered(self, table_factory):
        table = table_factory(["Name", "", "Total Cost"], [["a", "b", "c"]])
        first_line = serialize_table(table).split("\n")[0]
        assert parse_row(first_line) == table.headers

    def test_alignments_recovered(self, table_factory):
        alignments = ["left", "right", "center", "none"]
        table = table_factory(["a", "b", "c", "d"], [], alignments=alignments)
        assert parse_alignments(table_lines(table)[1]) == alignments

    def test_serialized_table_reparses(self, table_factory):
        table = table_factory(["Item", "Qty"], [["apple", "3"], ["", "12"]], alignments=["center", "right"])
        reparsed = parse_document(serialize_table(table)).tables[0]
        assert reparsed.headers == table.headers
        assert reparsed.alignments == table.alignments
        assert reparsed.rows == table.rows


# ===========================================================================
# table_to_csv tests
# ===========================================================================


class TestTableToCsv:

    def test_basic_csv(self, two_by_two):
        assert table_to_csv(two_by_two) == "A,B\n1,2\n3,4\n"

    def test_quotes_cells_with_commas(self, table_factory):
        table = table_factory(["Name", "Note"], [["Smith, J.", 'said "hi"']])
        assert table_to_csv(table) == 'Name,Note\n"Smith, J.","said ""hi"""\n'

    def test_tsv(self, two_by_two):
        assert table_to_csv(two_by_two, delimiter="\t") == "A\tB\n1\t2\n3\t4\n"

    def test_header_only(self, table_factory):
        assert table_to_csv(table_factory(["A", "B"], [])) == "A,B\n"
