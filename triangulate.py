
#command line front end: triangulates a file of points, or random points,
#and prints each point's neighbors.
#
#    triangulate points.json
#    triangulate drawing.svg --triangles
#    triangulate --random 100 --seed 0 --plot
#    DELAUNAY_TRACE_DIR=/tmp/steps triangulate points.json

import argparse
import json
import logging
import os
import sys
from pprint import pprint

from math_funcs import INPUT_POINT_ROUNDING, CROSS_PRODUCT_ROUNDING, RADIUS_SIGFIGS
from delaunay_triangulation import Delaunay
from delaunay_errors import DelaunayError
from delaunay_trace import JsonTracer, LoggingTracer, chain
from load_points import load_points, normalize_points, random_points

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Delaunay triangulation of a 2D point set (Lee and Schachter divide and conquer).")
    parser.add_argument("file", nargs="?",
                        help="points to triangulate, .json ([{\"x\": 0, \"y\": 0}, ...]) or .svg")
    parser.add_argument("--random", type=int, metavar="N",
                        help="triangulate N random points in [-1, 1]^2 instead of a file")
    parser.add_argument("--seed", type=int, default=0, help="seed for --random")
    parser.add_argument("--normalize", action="store_true",
                        help="scale the points to fit [0, 1]^2, keeping their aspect ratio")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--triangles", action="store_true", help="print triangles instead of neighbors")
    output.add_argument("--json", action="store_true", help="print the whole triangulation as json")

    parser.add_argument("--plot", action="store_true", help="show the triangulation with matplotlib")
    parser.add_argument("--trace-dir", default=os.environ.get("DELAUNAY_TRACE_DIR"),
                        help="write a json snapshot of every step to this directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every step of the algorithm")

    parser.add_argument("--input-digits", type=int, default=INPUT_POINT_ROUNDING,
                        help="decimal places input coordinates are rounded to")
    parser.add_argument("--cross-digits", type=int, default=CROSS_PRODUCT_ROUNDING,
                        help="decimal places cross products are rounded to")
    parser.add_argument("--radius-sigfigs", type=int, default=RADIUS_SIGFIGS,
                        help="significant figures used by the circumcircle test")

    args = parser.parse_args(argv)
    if (args.file is None) == (args.random is None):
        parser.error("give either a file or --random N")
    return args


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    tracers = []
    if args.verbose:
        tracers.append(LoggingTracer())
    if args.trace_dir:
        tracers.append(JsonTracer(args.trace_dir))

    try:
        if args.random is not None:
            points = random_points(args.random, seed=args.seed)
        else:
            points = load_points(args.file)

        if args.normalize:
            points = normalize_points(points)

        t = Delaunay(points, tracer=chain(*tracers) if tracers else None,
                     input_digits=args.input_digits,
                     cross_digits=args.cross_digits,
                     radius_sigfigs=args.radius_sigfigs)
    except (DelaunayError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if getattr(e, "points", None):
            print(json.dumps([{"x": x, "y": y, "idx": i} for x, y, i in e.points]),
                  file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(t.to_dict(), indent=2))
    elif args.triangles:
        pprint(sorted(tuple(p.key() for p in tri) for tri in t.triangles()), width=80)
    else:
        pprint(t.neighbor_graph(), width=80)

    if args.plot:
        import matplotlib.pyplot as plt
        from delaunay_plot import plot_triangulation
        plot_triangulation(t, annotate=len(t.points) <= 50)
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
