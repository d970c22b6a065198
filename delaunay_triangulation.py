
#this script triangulates a set of points.
#It is an implementation of the divide-and-conquer algorithm described by
#Lee and Schachter in 1980:
#https://web.archive.org/web/20210506213702/http://www.personal.psu.edu/faculty/c/x/cxc11/AERSP560/DELAUNEY/13_Two_algorithms_Delauney.pdf
#
#the points are sorted left to right and split in half until only 1-3 points
#remain. Those are triangulated directly, then neighboring halves are merged
#by walking from their lower to their upper common tangent, deleting edges
#that are no longer delaunay and adding edges across the gap.
#
#Example:
#    t = Delaunay([(1, 2, 'A'), (5, 3, 'B'), (2, 4, 'C'), (0, 3, 'D'), (3, 5, 'E')])
#    t.neighbor_graph()
#    => {(0.0, 3.0): [(1.0, 2.0), (2.0, 4.0), (3.0, 5.0)], ...}

import itertools
import logging
import math
import time

import numpy as np

from math_funcs import (circumcircle, circumcenter, sigfigs, within_circle,
                        INPUT_POINT_ROUNDING, CROSS_PRODUCT_ROUNDING, RADIUS_SIGFIGS)
from delaunay_point import Point
from delaunay_hull import Hull, tangents
from delaunay_errors import DelaunayError, InvalidInputError, MergeError
from delaunay_trace import null_tracer

logger = logging.getLogger(__name__)


class Delaunay:
    #points is a list of (x, y) or (x, y, name).
    #tracer is called as tracer(triangulation, event, **details) at each
    #step of the algorithm, see delaunay_trace.py.
    def __init__(self, points, tracer=None,
                 input_digits=INPUT_POINT_ROUNDING,
                 cross_digits=CROSS_PRODUCT_ROUNDING,
                 radius_sigfigs=RADIUS_SIGFIGS):
        self.tracer = null_tracer if tracer is None else tracer
        self.radius_sigfigs = radius_sigfigs
        self._hull_ids = itertools.count()

        #points in input order, and in the sorted order used to triangulate
        self.points = _load_points(points, input_digits, cross_digits)
        self.sorted_points = sorted(self.points)
        _check_coincident(self.sorted_points)

        start = time.perf_counter()
        self.hull = self._triangulate(self.sorted_points)
        logger.debug("Triangulated %d points in %.4f seconds",
                     len(self.points), time.perf_counter() - start)
        self._trace("done", count=len(self.points))

    def _trace(self, event, **details):
        self.tracer(self, event, **details)

    def _new_hull(self, points):
        return Hull(points, next(self._hull_ids))

    #####                  #####
    #####  Edge functions  #####
    #####                  #####

    #creates an edge between two points.
    #called INSERT(A, B) in Lee and Schachter.
    def _join(self, p1, p2, becomes_first=False):
        p1.add(p2, becomes_first)
        p2.add(p1)
        self._trace("join", a=p1, b=p2, first=becomes_first)

    #called DELETE(A, B) in Lee and Schachter.
    def _unjoin(self, p1, p2, whence=None):
        p1.remove(p2)
        p2.remove(p1)
        self._trace("unjoin", a=p1, b=p2, whence=whence)

    #true if q is not strictly inside the circumcircle of p1, p2, p3.
    #called QTEST(H, I, J, K) in Lee and Schachter.
    def outside(self, p1, p2, p3, q):
        #the merge uses this to check a point against itself
        if q is p1 or q is p2 or q is p3:
            return True

        circle = circumcircle(p1.x, p1.y, p2.x, p2.y, p3.x, p3.y)
        if circle is None:
            raise MergeError(f"Outside test on collinear points {p1!r}, {p2!r}, {p3!r}",
                             [(p.x, p.y, p.idx) for p in (p1, p2, p3, q)])
        x, y, rsquared = circle

        dx = q.x - x
        dy = q.y - y
        dsquared = dx * dx + dy * dy

        #rounding error in the circle can put points on the circle inside it
        result = sigfigs(dsquared, self.radius_sigfigs) >= sigfigs(rsquared, self.radius_sigfigs)

        self._trace("outside", points=(p1, p2, p3), query=q, center=(x, y),
                    rsquared=rsquared, dsquared=dsquared, outside=result)
        return result

    #####                  #####
    #####  Triangulation   #####
    #####                  #####

    #points must be sorted.
    def _triangulate(self, points):
        self._trace("triangulate", count=len(points))

        if len(points) == 0:
            return self._new_hull([])

        if len(points) == 1:
            return self._new_hull(points)

        if len(points) == 2:
            h = self._new_hull(points)
            points[0].add(points[1])
            points[1].add(points[0])
            self._trace("base", points=tuple(points))
            return h

        if len(points) == 3:
            h = self._new_hull(points)

            #points are sorted, so p1 is leftmost and p3 is rightmost.
            #links are added so each point's first neighbor is its
            #counterclockwise successor on the hull.
            p1, p2, p3 = points
            c = p2.cross(p1, p3)
            if c < 0:
                #p2 is right of p1->p3; p2 goes on the bottom
                p1.add(p2)
                p2.add(p3)
                p3.add(p1)

                p3.add(p2)
                p2.add(p1)
                p1.add(p3)
            elif c > 0:
                #p2 is left of p1->p3; p2 goes on the top
                p1.add(p3)
                p3.add(p2)
                p2.add(p1)

                p1.add(p2)
                p2.add(p3)
                p3.add(p1)
            else:
                #collinear, link left to right without making a triangle
                p1.add(p2)
                p2.add(p3)

                p3.add(p2)
                p2.add(p1)

            self._trace("base", points=tuple(points), cross=c)
            return h

        #4 or more points; divide and conquer
        half = len(points) // 2
        left = points[:half]
        right = points[half:]
        logger.debug("Splitting %d points into %d and %d", len(points), len(left), len(right))
        self._trace("split", left=len(left), right=len(right),
                    midpoint=(left[-1].x + right[0].x) / 2)

        return self._merge(self._triangulate(left), self._triangulate(right))

    #merges two convex hulls that contain locally complete delaunay
    #triangulations. called MERGE in Lee and Schachter.
    def _merge(self, left, right):
        logger.debug("Merging %r into %r", right, left)

        (l_l, l_r), (u_l, u_r) = tangents(left, right)
        self._trace("tangents", lower=(l_l, l_r), upper=(u_l, u_r))

        try:
            l = l_l
            r = l_r

            #every pass joins a new edge between the hulls and those edges
            #are never removed, so a planar graph bounds the passes.
            #l and r can step back to points they already visited.
            for _ in range(3 * (len(left) + len(right))):
                if l is u_l and r is u_r:
                    break

                #no candidate on that side this pass
                no_right = False
                no_left = False

                self._join(l, r, l is l_l and r is l_r)

                r1 = r.clockwise(l)
                if r1.left_of(l, r):
                    r2 = r.clockwise(r1)
                    while not self.outside(r1, l, r, r2):
                        self._unjoin(r, r1, "from the right")
                        r1 = r2
                        r2 = r.clockwise(r1)
                else:
                    no_right = True

                l1 = l.counterclockwise(r)
                if l1.right_of(r, l):
                    l2 = l.counterclockwise(l1)
                    while not self.outside(l, r, l1, l2):
                        self._unjoin(l, l1, "from the left")
                        l1 = l2
                        l2 = l.counterclockwise(l1)
                else:
                    no_left = True

                if no_right:
                    l = l1
                elif no_left:
                    r = r1
                elif self.outside(l, r, r1, l1):
                    r = r1
                else:
                    l = l1
            else:
                if not (l is u_l and r is u_r):
                    raise MergeError(f"Merge did not reach the upper tangent {u_l!r} -> {u_r!r}")

            #the upper tangent is left out of Lee and Schachter's loop
            self._join(u_r, u_l, True)

        except DelaunayError as e:
            points = left.points + right.points
            raise MergeError(
                f"Merging {right!r} into {left!r} failed: {e}",
                [(p.x, p.y, p.idx) for p in points]) from e

        merged = left.add_hull(right)
        self._trace("merge", hull=merged.hull_id, count=len(merged))
        return merged

    #####                  #####
    #####     Results      #####
    #####                  #####

    #returns a list of triangles as tuples of sorted points.
    def triangles(self):
        traversed = set()
        found = {}

        for p in self.sorted_points:
            for n in p.neighbors:
                key = (id(p), id(n)) if p < n else (id(n), id(p))
                if key in traversed:
                    continue
                traversed.add(key)

                #a point next to n on both ends of the edge closes a
                #triangle, unless it's the outside of a triangular hull
                ncw = n.clockwise(p)
                if ncw is p.counterclockwise(n) and ncw.left_of(p, n):
                    tri = tuple(sorted((n, p, ncw)))
                    found.setdefault(tuple(map(id, tri)), tri)

        return list(found.values())

    #triangles as an (m, 3) array of input indices.
    def triangle_indices(self):
        tris = [[p.idx for p in t] for t in self.triangles()]
        return np.array(tris, dtype=int).reshape(-1, 3)

    #circumcenters of the triangles, in the same order as triangles().
    def circumcenters(self):
        return [circumcenter(a.x, a.y, b.x, b.y, c.x, c.y) for a, b, c in self.triangles()]

    #undirected edges as sorted pairs of points.
    def edges(self):
        return [(p, n) for p in self.sorted_points for n in p.neighbors if p < n]

    #{(x, y): [(x, y), ...]} with neighbors sorted left to right.
    def neighbor_graph(self):
        return {p.key(): [n.key() for n in sorted(p.neighbors)] for p in self.sorted_points}

    #walks the outside of the triangulation counterclockwise, starting from
    #the leftmost point or from start, which must be on the hull.
    def convex_hull(self, start=None):
        if start is None:
            start = self.sorted_points[0]
        if start.first is None:
            return [start]

        hull = [start]
        seen = {id(start)}
        prev, cur = start, start.first
        for _ in range(2 * len(self.points) + 1):
            if cur is start:
                return hull
            if id(cur) not in seen:
                seen.add(id(cur))
                hull.append(cur)
            prev, cur = cur, cur.counterclockwise(prev)

        raise MergeError(f"Convex hull walk from {start!r} did not return to its start",
                         [(p.x, p.y, p.idx) for p in hull])

    def to_dict(self):
        return {
            "points": [
                {
                    "x": p.x, "y": p.y,
                    "idx": p.idx,
                    "name": p.name,
                    "hull": p.hull_id,
                    "neighbors": [{"x": n.x, "y": n.y, "first": n is p.first}
                                  for n in p.neighbors],
                }
                for p in self.sorted_points
            ]
        }

    #checks that every edge goes both ways, and that no triangle's circle
    #contains another point. raises MergeError on failure.
    def validate(self):
        for p in self.sorted_points:
            for n in p.neighbors:
                if not any(m is p for m in n.neighbors):
                    raise MergeError(f"{p!r} links to {n!r} but not the other way",
                                     [(q.x, q.y, q.idx) for q in (p, n)])

        coords = np.array([p.key() for p in self.sorted_points], dtype=float).reshape(-1, 2)
        for tri in self.triangles():
            circle = circumcircle(*[v for p in tri for v in p.key()])
            if circle is None:
                raise MergeError(f"Triangle {tri!r} is degenerate",
                                 [(p.x, p.y, p.idx) for p in tri])

            #rough filter first, cocircular points sit right on the circle
            x, y, rsquared = circle
            d = np.sum((coords - [x, y]) ** 2, axis=1)
            for i in np.nonzero(d < rsquared * (1 - 1e-9))[0]:
                q = self.sorted_points[i]
                if any(q is p for p in tri):
                    continue
                if within_circle([p.key() for p in tri], q.key()):
                    raise MergeError(f"{q!r} is inside the circumcircle of {tri!r}",
                                     [(p.x, p.y, p.idx) for p in tri + (q,)])

        return self


#wraps input rows in points, keeping their input order.
def _load_points(rows, input_digits, cross_digits):
    points = []
    for idx, row in enumerate(rows):
        try:
            values = list(row)
        except TypeError:
            raise InvalidInputError(f"Point {idx} is not a sequence: {row!r}") from None

        if len(values) not in (2, 3):
            raise InvalidInputError(f"Point {idx} should be (x, y) or (x, y, name), not {row!r}")

        try:
            x, y = float(values[0]), float(values[1])
        except (TypeError, ValueError):
            raise InvalidInputError(f"Point {idx} has non-numeric coordinates: {row!r}") from None

        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidInputError(f"Point {idx} has non-finite coordinates: {row!r}")

        name = values[2] if len(values) == 3 else None
        points.append(Point(x, y, idx, name, input_digits=input_digits, cross_digits=cross_digits))

    if not points:
        raise InvalidInputError("At least one point is needed to triangulate")

    return points

#identical points would make a zero length edge
def _check_coincident(sorted_points):
    for a, b in zip(sorted_points[:-1], sorted_points[1:]):
        if a.x == b.x and a.y == b.y:
            raise InvalidInputError(
                f"Points {a.idx} and {b.idx} are both at [{a.x}, {a.y}]; "
                "remove or jitter duplicates before triangulating")
