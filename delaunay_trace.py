
#tracers for watching the triangulation work.
#A tracer is any callable taking (triangulation, event, **details). The
#triangulation calls it when it triangulates, splits, or merges a set of
#points, finds tangents, joins or unjoins an edge, and runs an outside test.
#Nothing is traced unless a tracer is passed in.

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def null_tracer(triangulation, event, **details):
    pass


#calls several tracers in order
def chain(*tracers):
    def tracer(triangulation, event, **details):
        for t in tracers:
            t(triangulation, event, **details)
    return tracer


class LoggingTracer:
    def __init__(self, log=None, level=logging.DEBUG):
        self.log = logger if log is None else log
        self.level = level

    def __call__(self, triangulation, event, **details):
        if not self.log.isEnabledFor(self.level):
            return
        described = " ".join(f"{k}={_describe(v)}" for k, v in details.items())
        self.log.log(self.level, "%s %s", event, described)


#writes a json snapshot of the whole triangulation at every step, for
#replaying or animating the algorithm. Steps that change nothing are skipped.
class JsonTracer:
    def __init__(self, directory, prefix="delaunay"):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.prefix = prefix
        self.files = []
        self._last = None

    def __call__(self, triangulation, event, **details):
        snapshot = triangulation.to_dict()
        snapshot["event"] = event
        snapshot["details"] = {k: _jsonable(v) for k, v in details.items()}

        if snapshot == self._last:
            return
        self._last = snapshot

        path = self.directory / f"{self.prefix}_{len(self.files):05d}.json"
        path.write_text(json.dumps(snapshot, indent=2))
        self.files.append(path)
        logger.debug("Wrote %s after %s", path, event)


#a list of (event, details) tuples, with points replaced by coordinates.
#mostly useful in tests.
class RecordingTracer:
    def __init__(self):
        self.events = []

    def __call__(self, triangulation, event, **details):
        self.events.append((event, {k: _jsonable(v) for k, v in details.items()}))

    def count(self, event):
        return sum(1 for e, _ in self.events if e == event)


def _describe(v):
    if isinstance(v, (tuple, list)):
        return "(" + ", ".join(_describe(x) for x in v) + ")"
    if hasattr(v, "x") and hasattr(v, "y"):
        return f"{v.idx}:[{v.x}, {v.y}]"
    return repr(v)

def _jsonable(v):
    if isinstance(v, (tuple, list)):
        return [_jsonable(x) for x in v]
    if hasattr(v, "x") and hasattr(v, "y"):
        return {"x": v.x, "y": v.y, "idx": v.idx}
    return v
