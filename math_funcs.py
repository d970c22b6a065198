
import math
import numpy as np

#####                  #####
#####     Rounding     #####
#####                  #####

#input coordinates are rounded to this many decimal places.
INPUT_POINT_ROUNDING = 9

#cross products are rounded to this many decimal places before being
#compared against zero. unrounded cross products misclassify near-collinear
#points, which breaks the triangulation.
CROSS_PRODUCT_ROUNDING = 12

#squared radii and distances are rounded to this many significant figures
#before the in-circle comparison.
RADIUS_SIGFIGS = 12

#rounds a value to a number of significant figures.
#zero, infinities, and nan are returned unchanged.
def sigfigs(value, digits):
    if value == 0 or not math.isfinite(value):
        return value
    return round(value, digits - 1 - math.floor(math.log10(abs(value))))


#####                  #####
##### Simple functions #####
#####                  #####

#2d cross product of the rays o->p and o->q.
#positive if q is left of o->p, negative if right, zero if collinear.
def cross(o, p, q, digits=CROSS_PRODUCT_ROUNDING):
    c = (p.x - o.x) * (q.y - o.y) - (p.y - o.y) * (q.x - o.x)
    return round(c, digits)

#returns the perpendicular bisector of a segment as (a, b, c),
#where a*x + b*y = c.
#https://math.stackexchange.com/a/2079662
def perpendicular_bisector(x1, y1, x2, y2):
    return (
        x2 - x1,
        y2 - y1,
        0.5 * (x2 * x2 - x1 * x1 + y2 * y2 - y1 * y1),
    )

#intersects two lines given as (a, b, c) with a*x + b*y = c.
#returns None if the lines are parallel or coincident.
def line_intersection(line1, line2):
    a, b, c = line1
    d, e, f = line2

    denom = float(b * d - a * e)
    if denom == 0:
        return None

    x = (b * f - c * e) / denom
    y = (c * d - a * f) / denom
    return x, y

#center of the circle through three points, or None if they are collinear.
def circumcenter(x1, y1, x2, y2, x3, y3):
    b1 = perpendicular_bisector(x1, y1, x2, y2)
    b2 = perpendicular_bisector(x2, y2, x3, y3)
    return line_intersection(b1, b2)

#circle through three points as (x, y, rsquared), or None if collinear.
#the squared radius avoids a square root and its rounding error.
def circumcircle(x1, y1, x2, y2, x3, y3):
    center = circumcenter(x1, y1, x2, y2, x3, y3)
    if center is None:
        return None

    x, y = center
    dx = x - x1
    dy = y - y1
    return x, y, dx * dx + dy * dy

#signed area of a polygon given as a list of (x, y).
#negative if the vertices wind clockwise.
#http://mathworld.wolfram.com/PolygonArea.html
def polygon_area(vertices):
    if len(vertices) < 3:
        raise ValueError(f"A polygon needs 3 or more vertices, not {len(vertices)}")

    v = np.asarray(vertices, dtype=float)
    x, y = v[:, 0], v[:, 1]
    return 0.5 * float(np.sum(np.roll(x, 1) * y - x * np.roll(y, 1)))


#####                  #####
##### Matrix functions #####
#####                  #####

#given three points, determine if the fourth point is strictly
#within the circle through the other three.
def within_circle(tri, point):
    #a circle through center p,q with radius r satisfies
    #0 = -2p*(x) - 2q*(y) + 1*(x^2 + y^2) + 1*(p^2 + q^2 - r^2)
    #which forms a basis under [x, y, x^2 + y^2, 1].
    #if four vectors in this basis are coplanar, the determinant is zero.
    def basis(x, y):
        return [x, y, x**2 + y**2, 1]

    M = np.array([basis(*t) for t in list(tri) + [point]], dtype=float)

    #the sign flips with the winding of the tri, so normalize it
    #against the tri's orientation.
    winding = np.sign(polygon_area(list(tri)))
    if winding == 0:
        return False
    return 0 < winding * np.linalg.det(M)
