
#exceptions raised by the triangulation.
#input and adjacency errors are the caller's problem, merge errors are bugs
#in the merge or tangent logic for a given input, and carry the points
#needed to reproduce them.

class DelaunayError(Exception):
    pass

#empty, malformed, non-finite, or coincident input points.
class InvalidInputError(DelaunayError, ValueError):
    pass

#a neighbor list operation that would break a point's angular ordering.
class AdjacencyError(DelaunayError):
    pass

class MergeError(DelaunayError):
    def __init__(self, message, points=None):
        super().__init__(message)
        #list of (x, y, idx) for every point involved
        self.points = list(points) if points is not None else []
