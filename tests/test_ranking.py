from adablob.core import Coord, Region, rank_regions

def make_region(rows, cols, size=1):
    tl, br = Coord(0, 0), Coord(rows, cols)
    return Region(tl, Coord(rows, 0), Coord(0, cols), br, size, (0, 0, rows, cols))

def test_descending_box_area():
    regs = [make_region(5, 10), make_region(2, 5), make_region(3, 10)]
    assert [r.box_area for r in rank_regions(regs)] == [50, 30, 10]

def test_ties_keep_input_order_and_input_untouched():
    a, b, c = make_region(2, 3, size=1), make_region(3, 2, size=2), make_region(4, 4, size=3)
    regs = [a, b, c]
    ranked = rank_regions(regs)
    assert ranked == [c, a, b]
    assert ranked[1] is a and ranked[2] is b
    assert regs == [a, b, c]

def test_top_k():
    regs = [make_region(1, 1), make_region(2, 2), make_region(3, 3)]
    assert [r.box_area for r in rank_regions(regs, top_k=2)] == [9, 4]
    assert rank_regions(regs, top_k=0) == []
    assert rank_regions([]) == []
