import io

import pytest

from coltable import (
    Color,
    ColumnDef,
    ColumnFlag,
    ColumnType,
    InvalidColumnFlags,
    MalformedArguments,
    Table,
    TableClosed,
    UnknownColor,
    UnsupportedColumnType,
    table_add_row,
    table_begin,
    table_end,
)

COLUMNS = [
    ColumnDef("N", ColumnType.INT, ColumnFlag.JUSTIFY_RIGHT),
    ColumnDef("OK", ColumnType.BOOL, ColumnFlag.COLOR_EXPLICIT),
]


def test_widths_start_at_header_lengths(plain):
    table = Table(
        [ColumnDef("ITERATION", ColumnType.INT), ColumnDef("X", ColumnType.STRING)],
        resolver=plain,
    )
    assert table.widths == (9, 1)
    assert len(table) == 0


def test_widths_are_running_maxima(plain):
    table = Table([ColumnDef("NAME", ColumnType.STRING), ColumnDef("V", ColumnType.DOUBLE)], resolver=plain)
    values = [("a", 1.0), ("abcdefgh", 22.5), ("abc", -1000.25), (None, 0.0)]
    for name, v in values:
        table.add_row(name, v)

    texts = [["a", "abcdefgh", "abc", "<empty>"], ["1.000000", "22.500000", "-1000.250000", "0.000000"]]
    assert table.widths == (
        max(len("NAME"), *(len(t) for t in texts[0])),
        max(len("V"), *(len(t) for t in texts[1])),
    )
    assert len(table) == 4


def test_widths_never_shrink(plain):
    table = Table([ColumnDef("S", ColumnType.STRING)], resolver=plain)
    table.add_row("long text")
    table.add_row("x")
    assert table.widths == (9,)


def test_rows_hold_one_cell_per_column(plain):
    table = Table(COLUMNS, resolver=plain)
    table.add_row(1, Color.GREEN, True)
    (row,) = table.rows
    assert [c.text for c in row] == ["1", "yes"]


def test_wrong_argument_count_leaves_table_untouched(plain):
    table = Table(COLUMNS, resolver=plain)
    table.add_row(1, Color.GREEN, True)

    with pytest.raises(MalformedArguments):
        table.add_row(1, True)
    with pytest.raises(MalformedArguments):
        table.add_row(1, Color.GREEN, True, "extra")

    assert len(table) == 1
    assert table.widths == (1, 3)


def test_failed_cell_discards_whole_row(plain):
    table = Table(COLUMNS, resolver=plain)

    # first cell is fine and wide, second one is not a bool
    with pytest.raises(MalformedArguments):
        table.add_row(123456, Color.RED, "yes")
    with pytest.raises(UnknownColor):
        table.add_row(123456, 12, True)

    assert len(table) == 0
    assert table.widths == (1, 2)

    # table is still usable afterwards
    table.add_row(7, Color.RED, False)
    assert len(table) == 1


def test_column_validation():
    with pytest.raises(UnsupportedColumnType):
        Table([ColumnDef("X", 9)])
    with pytest.raises(InvalidColumnFlags):
        Table([ColumnDef("X", ColumnType.INT, ColumnFlag.COLOR_EXPLICIT | ColumnFlag.CUSTOM)])
    with pytest.raises(InvalidColumnFlags):
        Table([ColumnDef("X", ColumnType.INT, ColumnFlag.COLOR_256 | ColumnFlag.COLOR_EXPLICIT)])
    with pytest.raises(MalformedArguments):
        Table([ColumnDef(None, ColumnType.INT)])


def test_raw_int_types_and_flags_are_accepted(plain):
    table = Table([ColumnDef("X", 0, 2), ColumnDef("Y", 4, 8)], resolver=plain)
    table.add_row(5, Color.BLUE, True)
    assert table.render() == "X  Y  \n5  yes  \n"


def test_columns_are_kept_not_copied(plain):
    cols = [ColumnDef("A", ColumnType.INT)]
    table = Table(cols, resolver=plain)
    assert table.columns[0] is cols[0]


def test_end_writes_and_releases(plain):
    table = Table(COLUMNS, resolver=plain)
    table.add_row(1, Color.GREEN, True)
    out = io.StringIO()

    table.end(out)

    assert out.getvalue() == "N  OK  \n1  yes  \n"
    assert table.closed
    assert len(table) == 0
    assert table.widths == ()


def test_operations_after_end_raise(plain):
    table = Table(COLUMNS, resolver=plain)
    table.end(io.StringIO())

    with pytest.raises(TableClosed):
        table.add_row(1, Color.GREEN, True)
    with pytest.raises(TableClosed):
        table.render()
    with pytest.raises(TableClosed):
        table.end(io.StringIO())


def test_end_defaults_to_stdout(plain, capsys):
    table = Table(COLUMNS, resolver=plain)
    table.end()
    assert capsys.readouterr().out == "N  OK  \n"


def test_write_errors_propagate_but_table_is_released(plain):
    class Broken(io.StringIO):
        def write(self, s):
            raise OSError("disk full")

    table = Table(COLUMNS, resolver=plain)
    table.add_row(1, Color.GREEN, True)

    with pytest.raises(OSError):
        table.end(Broken())
    assert table.closed
    assert len(table) == 0


def test_function_api(plain):
    table = table_begin(COLUMNS, resolver=plain)
    table_add_row(table, 1, Color.GREEN, True)
    table_add_row(table, 22, Color.RED, False)
    out = io.StringIO()
    table_end(table, out)
    assert out.getvalue() == "N   OK  \n 1  yes  \n22  no  \n"


def test_default_resolver_is_used(capsys):
    from coltable import set_colors_enabled

    set_colors_enabled(True)
    table = Table(COLUMNS)
    table.add_row(1, Color.GREEN, True)
    table.end()
    assert capsys.readouterr().out == "N  OK  \n1  \x1b[32myes  \x1b[m\n"


def test_double_overflow_is_a_table_error(plain):
    table = Table([ColumnDef("D", ColumnType.DOUBLE)], resolver=plain)
    with pytest.raises(MalformedArguments):
        table.add_row(10**400)
    assert len(table) == 0
    assert table.widths == (1,)
