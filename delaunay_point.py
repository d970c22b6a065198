
#a triangulation vertex and the links to its neighbors.
#neighbors are kept sorted by angle, so walking the list forwards goes
#counterclockwise around the point and walking it backwards goes clockwise.
#Lee and Schachter describe a circular doubly-linked list; a sorted list
#with binary search insertion behaves the same way.

import math
from bisect import bisect_left

from math_funcs import cross, INPUT_POINT_ROUNDING, CROSS_PRODUCT_ROUNDING
from delaunay_errors import AdjacencyError


class Point:
    def __init__(self, x, y, idx=None, name=None,
                 input_digits=INPUT_POINT_ROUNDING,
                 cross_digits=CROSS_PRODUCT_ROUNDING):
        self.x = round(float(x), input_digits)
        self.y = round(float(y), input_digits)
        self.idx = idx
        self.name = name
        self.cross_digits = cross_digits

        #id of the hull that currently owns this point. neighbors owned by
        #another hull are skipped by clockwise/counterclockwise.
        self.hull_id = None

        #parallel lists, sorted by angle
        self._neighbors = []
        self._angles = []
        self._first = None

    def key(self):
        return (self.x, self.y)

    #lexicographic ordering, x first and y to break ties.
    #equality is left as identity, neighbor lookups depend on it.
    def __lt__(self, other):
        return self.x < other.x or (self.x == other.x and self.y < other.y)

    def __gt__(self, other):
        return self.x > other.x or (self.x == other.x and self.y > other.y)

    def __repr__(self):
        name = "" if self.name is None else f" {self.name!r}"
        return (f"<Point {self.hull_id}/{self.idx}{name}: "
                f"[{self.x}, {self.y}]{{{len(self._neighbors)}}}>")

    @property
    def first(self):
        return self._first

    @property
    def neighbors(self):
        return list(self._neighbors)

    #angle from self to p, from -pi to pi starting at the negative x axis.
    def angle(self, p):
        return math.atan2(p.y - self.y, p.x - self.x)

    #cross product of o->p and o->self. positive if self is left of o->p.
    def cross(self, o, p):
        return cross(o, p, self, self.cross_digits)

    #false when collinear
    def right_of(self, p1, p2):
        return self.cross(p1, p2) < 0

    def left_of(self, p1, p2):
        return self.cross(p1, p2) > 0

    def _position(self, p):
        try:
            return self._neighbors.index(p)
        except ValueError:
            raise AdjacencyError(f"{p!r} is not a neighbor of {self!r}") from None

    #next neighbor clockwise from p.
    #called PRED(v_i, v_ij) in Lee and Schachter.
    def clockwise(self, p):
        return self._step(p, -1)

    #next neighbor counterclockwise from p.
    #called SUCC(v_i, v_ij) in Lee and Schachter.
    def counterclockwise(self, p):
        return self._step(p, 1)

    def _step(self, p, direction):
        #the position is found again on every call, insertions during a
        #merge shift everything after them.
        base = self._position(p)
        count = len(self._neighbors)

        i = base
        while True:
            i = (i + direction) % count
            n = self._neighbors[i]

            #mid-merge, edges to the other hull are added before the old
            #edges are removed. stepping onto them walks onto the wrong hull.
            if n.hull_id == self.hull_id or i == base:
                return n

    #inserts p into the neighbor list at its angle.
    #called INSERT in Lee and Schachter (one direction of it).
    def add(self, p, becomes_first=False):
        if p is self or (p.x == self.x and p.y == self.y):
            raise AdjacencyError(f"Cannot link {self!r} to an identical point {p!r}")

        angle = self.angle(p)
        i = bisect_left(self._angles, angle)

        if i < len(self._angles) and self._angles[i] == angle:
            n = self._neighbors[i]
            if n is p:
                raise AdjacencyError(f"{p!r} is already a neighbor of {self!r}")
            raise AdjacencyError(
                f"{p!r} is in the same direction from {self!r} as neighbor {n!r}")

        self._neighbors.insert(i, p)
        self._angles.insert(i, angle)

        if self._first is None or becomes_first:
            self._first = p

    #removes p from the neighbor list.
    def remove(self, p):
        i = self._position(p)

        if self._first is p:
            self._first = self.counterclockwise(p)
            if self._first is p:
                self._first = None

        del self._neighbors[i]
        del self._angles[i]
