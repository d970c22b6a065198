
#loads point sets to triangulate from json or svg files, or makes random ones.
#
#json files are either a list of objects, [{"x": 0, "y": 0, "name": "A"}, ...]
#or a list of rows, [[0, 0], [1, 0, "B"], ...].
#svg files contribute the center of every circle and every path vertex.

#https://stackoverflow.com/questions/20808614/parsing-svg-file-paths-with-python/35781017

import json
import xml.dom.minidom
from pathlib import Path

import numpy as np
import svg.path


def parsePath(dom):
    path = svg.path.parse_path(dom.getAttribute('d'))
    c_vertices = [a.end for a in path]
    return [(v.real, v.imag) for v in c_vertices]

def parseCircle(dom):
    x = float(dom.getAttribute('cx'))
    y = float(dom.getAttribute('cy'))
    name = dom.getAttribute('id') or None
    return (x, y, name)

#returns a list of (x, y, name) from the circles and paths of an svg.
#svg y points down, so y is mirrored unless flip_y is False.
def load_svg(src, flip_y=True):
    doc = xml.dom.minidom.parse(str(src))

    points = list(map(parseCircle, doc.getElementsByTagName("circle")))
    for dom in doc.getElementsByTagName("path"):
        points += [(x, y, None) for x, y in parsePath(dom)]

    if flip_y:
        points = [(x, -y, name) for x, y, name in points]

    return unique_points(points)

def load_json(src):
    data = json.loads(Path(src).read_text())
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of points in {src}, got {type(data).__name__}")

    points = []
    for i, p in enumerate(data):
        if isinstance(p, dict):
            if 'x' not in p or 'y' not in p:
                raise ValueError(f"Point {i} in {src} is missing x or y: {p!r}")
            points.append((p['x'], p['y'], p.get('name')))
        elif isinstance(p, list) and len(p) in (2, 3):
            points.append(tuple(p) if len(p) == 3 else (p[0], p[1], None))
        else:
            raise ValueError(f"Point {i} in {src} should be an object or a list: {p!r}")
    return points

#picks a loader by file extension.
def load_points(src):
    ext = Path(src).suffix.lower()
    if ext == '.json':
        return load_json(src)
    if ext == '.svg':
        return load_svg(src)
    raise ValueError(f"Unknown extension {ext!r} for {src}")

#uniform random points in [low, high)^2
def random_points(count, seed=None, low=-1.0, high=1.0):
    rng = np.random.default_rng(seed)
    return [tuple(p) for p in rng.uniform(low, high, size=(count, 2))]

#drops exact repeats, like the start and end of a closed path.
def unique_points(points):
    seen = set()
    out = []
    for p in points:
        key = (p[0], p[1])
        if key in seen:
            continue
        seen.add(key)
        out.append(p)
    return out

#scales points to [0, 1], keeping the aspect ratio of the larger dimension.
#performs an inverse lerp.
def normalize_points(points):
    xy = np.array([p[:2] for p in points], dtype=float)
    low = xy.min(axis=0)
    size = (xy.max(axis=0) - low).max()
    if size == 0:
        size = 1.0
    xy = (xy - low) / size
    return [(x, y) + tuple(p[2:]) for (x, y), p in zip(xy.tolist(), points)]
