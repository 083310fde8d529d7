import pytest

from questkit.textedit_layout import (
    NEWLINE,
    FindState,
    PlainTextBuffer,
    TextBuffer,
    TextRow,
    find_charpos,
    locate_coord,
)

TEXT = "ab\ncd"
SECOND_ROW = TEXT.index(NEWLINE) + 1


@pytest.fixture
def buffer():
    return PlainTextBuffer(TEXT, char_width=1.0, line_height=1.0)


def test_abstract_buffer_cannot_be_created():
    with pytest.raises(TypeError):
        TextBuffer()


def test_bad_dimensions_rejected():
    with pytest.raises(ValueError):
        PlainTextBuffer("x", char_width=0)
    with pytest.raises(ValueError):
        PlainTextBuffer("x", line_height=-1)


def test_str_and_len(buffer):
    assert str(buffer) == TEXT
    assert len(buffer) == len(TEXT)


def test_layout_rows_cover_text(buffer):
    first = buffer.layout_row(0)
    second = buffer.layout_row(first.num_chars)
    assert first.num_chars == SECOND_ROW
    assert second.num_chars == len(TEXT) - SECOND_ROW
    assert first.num_chars + second.num_chars == len(buffer)
    assert first.x1 == buffer.char_width * (SECOND_ROW - 1)
    assert first.ymax - first.ymin == buffer.line_height


def test_newline_width_is_negative(buffer):
    assert buffer.get_width(0, SECOND_ROW - 1) < 0
    assert buffer.get_width(0, 0) == buffer.char_width


def test_insert_delete_round_trip(buffer):
    assert buffer.insert_chars(1, "XYZ") is True
    assert str(buffer) == "aXYZb\ncd"
    buffer.delete_chars(1, len("XYZ"))
    assert str(buffer) == TEXT


def test_insert_out_of_range(buffer):
    with pytest.raises(IndexError):
        buffer.insert_chars(len(TEXT) + 1, "x")
    with pytest.raises(IndexError):
        buffer.delete_chars(-1, 1)


def test_get_char(buffer):
    assert buffer.get_char(SECOND_ROW - 1) == NEWLINE
    assert buffer.get_char(SECOND_ROW) == TEXT[SECOND_ROW]


@pytest.mark.parametrize("n", range(len(TEXT) + 1))
def test_charpos_locate_round_trip(buffer, n):
    found = find_charpos(buffer, n, single_line=False)
    assert locate_coord(buffer, found.x + 0.1, found.y + 0.5) == n


def test_charpos_rows(buffer):
    top = find_charpos(buffer, 1, single_line=False)
    bottom = find_charpos(buffer, SECOND_ROW + 1, single_line=False)
    assert top.first_char == 0
    assert top.y == 0
    assert bottom.first_char == SECOND_ROW
    assert bottom.prev_first == 0
    assert bottom.y == buffer.line_height
    assert bottom.length == len(TEXT) - SECOND_ROW
    assert bottom.height == buffer.line_height


def test_charpos_after_trailing_newline():
    buf = PlainTextBuffer("ab\n")
    found = find_charpos(buf, len(buf), single_line=False)
    assert found.first_char == len(buf)
    assert found.length == 0
    assert found.x == 0
    assert found.y == buf.line_height


def test_charpos_single_line_end():
    buf = PlainTextBuffer("abc", char_width=2.0)
    found = find_charpos(buf, len(buf), single_line=True)
    assert found.y == 0
    assert found.first_char == 0
    assert found.length == len(buf)
    assert found.x == buf.layout_row(0).x1


def test_charpos_empty_buffer():
    buf = PlainTextBuffer("")
    found = find_charpos(buf, 0, single_line=False)
    assert found.first_char == 0
    assert found.length == 0


def test_locate_below_text(buffer):
    assert locate_coord(buffer, 0.0, 100.0) == len(buffer)


def test_locate_above_text(buffer):
    assert locate_coord(buffer, 1.5, -5.0) == 0


def test_locate_left_of_row(buffer):
    assert locate_coord(buffer, -3.0, 1.5) == SECOND_ROW


def test_locate_past_end_of_row_with_newline(buffer):
    assert locate_coord(buffer, 50.0, 0.5) == SECOND_ROW - 1


def test_locate_rounds_to_nearest_boundary(buffer):
    assert locate_coord(buffer, 0.4, 0.5) == 0
    assert locate_coord(buffer, 0.6, 0.5) == 1


def test_dataclass_defaults():
    assert TextRow() == TextRow(0.0, 0.0, 0.0, 0.0, 0.0, 0)
    assert FindState().prev_first == FindState().first_char