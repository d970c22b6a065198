
#draws a triangulation with matplotlib.

import numpy as np
import matplotlib.pyplot as plt

from math_funcs import circumcircle


#draws the edges, points, and optionally circumcircles and labels of a
#triangulation. Returns the axes so more can be drawn on top.
def plot_triangulation(triangulation, ax=None, circles=False, annotate=False,
                       hull=True, shrink=0.0):
    if ax is None:
        fig, ax = plt.subplots()

    ax.set_aspect(1)

    #draw every edge once
    for p, n in triangulation.edges():
        ax.plot([p.x, n.x], [p.y, n.y], color='black', linewidth=0.5)

    #draw the output tris, shrunk towards their centers so they can be told apart
    if shrink > 0:
        for tri in triangulation.triangles():
            p = [np.array(v.key()) for v in tri]
            pavg = sum(p) / 3
            p = [x * (1 - shrink) + shrink * pavg for x in p]
            ax.plot(*tuple(zip(*(p + [p[0]]))))

    #draw circles on every tri
    if circles:
        for a, b, c in triangulation.triangles():
            x, y, rsquared = circumcircle(a.x, a.y, b.x, b.y, c.x, c.y)
            ax.add_patch(plt.Circle((x, y), np.sqrt(rsquared), fill=False, color='gray'))

    if hull:
        outline = [p.key() for p in triangulation.convex_hull()]
        outline.append(outline[0])
        ax.plot(*tuple(zip(*outline)), color='red', linewidth=1.0)

    ax.scatter(*tuple(zip(*[p.key() for p in triangulation.points])), s=8, zorder=3)

    #annotate output points
    if annotate:
        for p in triangulation.points:
            label = str(p.idx) if p.name is None else f"{p.idx}: {p.name}"
            ax.annotate(label, p.key())

    return ax
