
#a convex hull around a locally complete triangulation, used while merging.
#see Delaunay._merge in delaunay_triangulation.py for how hulls are joined.

from delaunay_errors import MergeError


class Hull:
    #points *must* already be sorted by (x, y).
    #leftmost and rightmost are LM(s) and RM(s) in Lee and Schachter.
    def __init__(self, points, hull_id):
        self.hull_id = hull_id
        self.points = list(points)
        self.leftmost = self.points[0] if self.points else None
        self.rightmost = self.points[-1] if self.points else None

        for p in self.points:
            p.hull_id = hull_id

    def __len__(self):
        return len(self.points)

    def __repr__(self):
        return f"<Hull {self.hull_id}: {len(self.points)} points>"

    #takes ownership of the points in h. called *after* the merge has
    #created the edges between the two hulls.
    def add_hull(self, h):
        if not h.points:
            return self
        if not self.points:
            self.leftmost = h.leftmost

        self.rightmost = h.rightmost
        self.points.extend(h.points)

        for p in h.points:
            p.hull_id = self.hull_id

        return self

    #returns the lower and upper tangents linking this hull to a hull on
    #its right, as ((left, right), (left, right)).
    #called HULL in Lee and Schachter, extended to return both tangents.
    def tangents(self, right):
        left = self

        if not left.points or not right.points:
            raise MergeError(f"Cannot find tangents between {left!r} and {right!r}; a hull is empty")

        if left.rightmost > right.leftmost:
            raise MergeError(
                f"Rightmost point {left.rightmost!r} of {left!r} is right of "
                f"leftmost point {right.leftmost!r} of {right!r}",
                _coords(left.points + right.points))

        max_count = len(left) + len(right)

        #walk clockwise around left and counterclockwise around right until
        #neither next point is right of x->y, so x->y is the lowest segment.
        x = left.rightmost
        y = right.leftmost
        z = y.first
        z1 = x.first
        z2 = x.clockwise(z1) if z1 is not None else None
        lower = None
        for _ in range(max_count):
            if z is not None and z.right_of(x, y):
                old_z = z
                z = z.counterclockwise(y)
                y = old_z
            elif z2 is not None and z2.right_of(x, y):
                old_z2 = z2
                z2 = z2.clockwise(x)
                x = old_z2
            else:
                lower = (x, y)
                break

        if lower is None:
            raise MergeError(f"No lower tangent found between {left!r} and {right!r}",
                             _coords(left.points + right.points))

        #walk counterclockwise around left and clockwise around right until
        #neither next point is left of x->y, so x->y is the highest segment.
        x = left.rightmost
        y = right.leftmost
        z = y.first
        z_r = y.clockwise(z) if z is not None else None
        z_l = x.first
        upper = None
        for _ in range(max_count):
            if z_r is not None and z_r.left_of(x, y):
                old_z = z_r
                z_r = z_r.clockwise(y)
                y = old_z
            elif z_l is not None and z_l.left_of(x, y):
                old_z = z_l
                z_l = z_l.counterclockwise(x)
                x = old_z
            else:
                upper = (x, y)
                break

        if upper is None:
            raise MergeError(f"No upper tangent found between {left!r} and {right!r}",
                             _coords(left.points + right.points))

        return lower, upper


def tangents(left, right):
    return left.tangents(right)


def _coords(points):
    return [(p.x, p.y, p.idx) for p in points]
