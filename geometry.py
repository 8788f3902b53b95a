import logging
from typing import Iterable, List, Sequence, Tuple

from errors import InvalidInputError

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

LEFT, RIGHT, ON_LINE = (-1, 1, 0)

logger = logging.getLogger(__name__)


def _line_through(p: Point, q: Point) -> Tuple[float, float, float]:
    # a*x + b*y = c
    a = q[1] - p[1]
    b = p[0] - q[0]
    c = q[1] * p[0] - p[1] * q[0]
    return a, b, c


def _side(a: float, b: float, c: float, r: Point) -> int:
    val = a * r[0] + b * r[1] - c
    if val < 0:
        return LEFT
    if val > 0:
        return RIGHT
    return ON_LINE


def line_side(p: Point, q: Point, r: Point) -> int:
    """Which side of the line through p and q the point r lies on.

    Returns LEFT, RIGHT or ON_LINE. The comparison against zero is exact.
    """
    return _side(*_line_through(p, q), r)


def find_segments(points: Sequence[Point]) -> List[Segment]:
    """Brute-force search for the segments bounding the convex hull.

    A pair (i, j) bounds the hull when no point lies strictly on both sides
    of the line through them. Every pair is tested against every point, so
    this is cubic in len(points). Points lying on a hull edge without being
    its endpoints are not handled; such input yields extra segments.
    """
    n = len(points)
    segments: List[Segment] = []
    for i in range(n - 1):
        for j in range(i + 1, n):
            a, b, c = _line_through(points[i], points[j])
            left = right = False
            for pt in points:
                side = _side(a, b, c, pt)
                if side == LEFT:
                    left = True
                elif side == RIGHT:
                    right = True
            if not (left and right):
                segments.append((points[i], points[j]))
    logger.debug("%d of %d pairs bound the hull", len(segments), n * (n - 1) // 2)
    return segments


def extract_vertices(segments: Iterable[Segment]) -> List[Point]:
    vertices = set()
    for first, second in segments:
        vertices.add(first)
        vertices.add(second)
    return sorted(vertices)


def find_hull(points: Iterable[Point]) -> List[Point]:
    """Hull vertices of points, deduplicated and in lexicographic order.

    The input must not contain duplicates. Collinear input keeps every
    collinear point, since each one lies on a line with nothing strictly
    to either side.
    """
    pts = list(points)
    if not pts:
        raise InvalidInputError("one or more points are required to find the convex hull")
    if len(pts) == 1:
        return [pts[0]]
    return extract_vertices(find_segments(pts))
