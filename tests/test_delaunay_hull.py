import pytest

from delaunay_point import Point
from delaunay_hull import Hull, tangents
from delaunay_errors import MergeError


def segment_hull(a, b, hull_id):
    p, q = Point(*a), Point(*b)
    p.add(q)
    q.add(p)
    return Hull([p, q], hull_id)

#links the three points in the order given, so each first neighbor is its
#successor in that order.
def triangle_hull(a, b, c, hull_id):
    p, q, r = Point(*a), Point(*b), Point(*c)
    p.add(q)
    q.add(r)
    r.add(p)
    p.add(r)
    r.add(q)
    q.add(p)
    return Hull(sorted([p, q, r]), hull_id)


def keys(tangent_pair):
    return [tuple(p.key() for p in t) for t in tangent_pair]


#left segment, right segment, (lower, upper)
SEGMENTS = {
    "vertical segments with shared x": (
        [(-1, -2), (-1, -1)], [(-1, 1), (-1, 2)],
        [((-1, -1), (-1, 1)), ((-1, -1), (-1, 1))]),
    "horizontal segments with one shared x": (
        [(-2, -1), (0, -1)], [(0, 0), (2, 0)],
        [((0, -1), (2, 0)), ((-2, -1), (0, 0))]),
    "offset horizontal segments": (
        [(-2, -1), (-1, -1)], [(1, 0), (2, 0)],
        [((-1, -1), (2, 0)), ((-2, -1), (1, 0))]),
    "horizontal segments at the same y": (
        [(-2, 0), (-1, 0)], [(1, 0), (2, 0)],
        [((-1, 0), (1, 0)), ((-1, 0), (1, 0))]),
    "horizontal segment above a vertical segment": (
        [(-2, 3), (-1, 3)], [(1, -1), (1, 1)],
        [((-2, 3), (1, -1)), ((-1, 3), (1, 1))]),
    "horizontal segment below a vertical segment": (
        [(-2, -3), (-1, -3)], [(1, -1), (1, 1)],
        [((-1, -3), (1, -1)), ((-2, -3), (1, 1))]),
    "horizontal and vertical segment at the same y": (
        [(-2, 0), (-1, 0)], [(1, -1), (1, 1)],
        [((-2, 0), (1, -1)), ((-2, 0), (1, 1))]),
    "two vertical segments": (
        [(-1, 0), (-1, 1)], [(1, 0), (1, 1)],
        [((-1, 0), (1, 0)), ((-1, 1), (1, 1))]),
    "two tilted segments": (
        [(-1, 0), (-0.9, 1)], [(0.9, 1), (1, 0)],
        [((-1, 0), (1, 0)), ((-0.9, 1), (0.9, 1))]),
}


@pytest.mark.parametrize("left, right, expected", SEGMENTS.values(), ids=SEGMENTS.keys())
def test_segment_tangents(left, right, expected):
    l = segment_hull(*left, 0)
    r = segment_hull(*right, 1)
    assert keys(l.tangents(r)) == expected


def test_single_point_tangents():
    l = Hull([Point(-2, -1)], 0)
    r = Hull([Point(2, 1)], 1)
    assert keys(tangents(l, r)) == [((-2, -1), (2, 1)), ((-2, -1), (2, 1))]


def test_upright_triangle_tangents():
    l = triangle_hull((-3, -1), (-1, -1), (-2, 1), 0)
    r = triangle_hull((1, -1), (3, -1), (2, 1), 1)
    assert keys(l.tangents(r)) == [((-1, -1), (1, -1)), ((-2, 1), (2, 1))]


def test_opposite_triangle_tangents():
    #the left triangle points down
    l = triangle_hull((-3, 1), (-2, -1), (-1, 1), 0)
    r = triangle_hull((1, -1), (3, -1), (2, 1), 1)
    assert keys(l.tangents(r)) == [((-2, -1), (1, -1)), ((-1, 1), (2, 1))]


def test_overlapping_hulls_raise():
    l = Hull([Point(1, 0)], 0)
    r = Hull([Point(0, 0)], 1)
    with pytest.raises(MergeError) as e:
        l.tangents(r)
    assert sorted(e.value.points) == [(0.0, 0.0, None), (1.0, 0.0, None)]


def test_empty_hull_raises():
    with pytest.raises(MergeError, match="empty"):
        Hull([], 0).tangents(Hull([Point(0, 0)], 1))


def test_hull_takes_ownership():
    l = segment_hull((0, 0), (1, 1), 3)
    r = segment_hull((2, 0), (3, 1), 4)
    assert [p.hull_id for p in r.points] == [4, 4]

    merged = l.add_hull(r)
    assert merged is l
    assert len(merged) == 4
    assert merged.leftmost.key() == (0, 0)
    assert merged.rightmost.key() == (3, 1)
    assert {p.hull_id for p in merged.points} == {3}


def test_add_hull_to_empty_hull():
    r = segment_hull((2, 0), (3, 1), 1)
    merged = Hull([], 0).add_hull(r)
    assert merged.leftmost.key() == (2, 0)
    assert merged.rightmost.key() == (3, 1)
