import pytest

from knightclue.board import MAP_SIZE, BoardMap


def _grid_text(marks=None):
    rows = [["."] * MAP_SIZE for _ in range(MAP_SIZE)]
    for (x, y), code in (marks or {}).items():
        rows[y][x] = code
    return "\n".join("".join(row) for row in rows) + "\n"


def test_board_is_twenty_seven_square():
    text = "\n".join("." * 27 for _ in range(27)) + "\n"
    lines = BoardMap.from_text(text).render().splitlines()
    assert len(lines) == 27
    assert all(len(line) == 27 for line in lines)


def test_tile_reads_column_then_row():
    board = BoardMap.from_text(_grid_text({(3, 7): "c", (7, 3): "5"}))
    assert board.tile(3, 7) == "c"
    assert board.tile(7, 3) == "5"
    assert board.tile(0, 0) == "."


def test_render_round_trip():
    text = _grid_text({(1, 11): "c", (26, 26): "a"})
    board = BoardMap.from_text(text)
    assert board.render() == text.rstrip("\n")
    assert BoardMap.from_text(board.render()) == board


def test_extra_columns_and_rows_are_ignored():
    base = _grid_text({(2, 2): "9"})
    widened = "\n".join(line + "xyz" for line in base.splitlines()) + "\nEXTRA\n"
    assert BoardMap.from_text(widened) == BoardMap.from_text(base)


def test_crlf_line_endings_are_accepted():
    text = _grid_text({(4, 4): "b"})
    assert BoardMap.from_text(text.replace("\n", "\r\n")).tile(4, 4) == "b"


def test_too_few_rows_raise():
    lines = _grid_text().splitlines()[:-1]
    with pytest.raises(ValueError):
        BoardMap.from_text("\n".join(lines))


def test_short_row_raises():
    lines = _grid_text().splitlines()
    lines[5] = lines[5][:-1]
    with pytest.raises(ValueError):
        BoardMap.from_text("\n".join(lines))


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (MAP_SIZE, 0), (0, MAP_SIZE)])
def test_tile_outside_board_raises(x, y):
    board = BoardMap.from_text(_grid_text())
    with pytest.raises(IndexError):
        board.tile(x, y)


def test_load_reads_file(tmp_path):
    path = tmp_path / "plateau.txt"
    path.write_text(_grid_text({(10, 12): "2"}), encoding="utf-8")
    assert BoardMap.load(path).tile(10, 12) == "2"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        BoardMap.load(tmp_path / "absent.txt")