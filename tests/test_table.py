import io

from kmerfreq.table import TableWriter, format_header, format_row


class TestFormatting:
    def test_header(self):
        assert format_header(("AA", "AC")) == "seq_id\tAA\tAC"

    def test_row_uses_float_repr(self):
        assert format_row("r1", [0.2, 0, 1 / 3]) == "r1\t0.2\t0.0\t0.3333333333333333"

    def test_writer_counts_rows(self):
        buf = io.StringIO()
        w = TableWriter(buf)
        w.header(("A", "C"))
        w.row("x", [0.5, 0.5])
        w.row("y", [1.0, 0.0])
        assert w.rows == 2
        assert buf.getvalue() == "seq_id\tA\tC\nx\t0.5\t0.5\ny\t1.0\t0.0\n"
