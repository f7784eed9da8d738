from fastmaze.config import GenConfig
from fastmaze.mapgen.generator import generate
from fastmaze.session import LevelSession

CFG = GenConfig(width=30, height=24, room_attempts=80)

def test_step_wraps_below_zero():
    s = LevelSession(CFG)
    assert s.level == 0
    lvl = s.step(-1)
    assert s.level == 0xFFFFFFFF
    assert lvl == generate(-1, CFG)
    s.step(+1)
    assert s.level == 0

def test_step_wraps_above_max():
    s = LevelSession(CFG, level=0xFFFFFFFF)
    s.step(1)
    assert s.level == 0
    assert s.current == generate(0, CFG)

def test_revisit_gives_same_map():
    s = LevelSession(CFG, level=7)
    first = s.current
    s.step(1)
    assert s.current != first
    s.step(-1)
    assert s.current == first

def test_goto_normalises_index():
    s = LevelSession(CFG)
    lvl = s.goto(-3)
    assert s.level == 0xFFFFFFFD
    assert lvl.index == 0xFFFFFFFD
