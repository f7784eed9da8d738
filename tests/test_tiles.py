from fastmaze.tiles import Tile, is_open, tile_char

def test_tile_values():
    assert [int(t) for t in Tile] == [0, 1, 2, 4, 5]

def test_open_classification():
    assert not is_open(Tile.WALL)
    for t in (Tile.FLOOR, Tile.DOOR, Tile.START, Tile.END):
        assert is_open(t)
        assert is_open(int(t))
    assert not is_open(3)

def test_tile_chars():
    assert "".join(tile_char(t) for t in Tile) == ".#+<>"
    assert tile_char(99) == "?"
