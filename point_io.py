import logging
import math
import re
from typing import Iterable, List

from errors import MalformedSourceError, SourceIOError
from geometry import Point

logger = logging.getLogger(__name__)

# ASCII decimal or exponent notation only
_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _to_coord(token: str) -> float:
    if not _NUMBER.fullmatch(token):
        raise ValueError(token)
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(token)
    return value


def parse_points(text: str, source: str = "<string>") -> List[Point]:
    """Parse whitespace separated "x y" pairs.

    Duplicates are dropped and the points come back in lexicographic order.
    A lone coordinate left at the end of the input is ignored.
    """
    tokens = text.split()
    pts = set()
    for i in range(0, len(tokens) - 1, 2):
        try:
            pts.add((_to_coord(tokens[i]), _to_coord(tokens[i + 1])))
        except ValueError:
            raise MalformedSourceError(f"{source}: error reading point") from None
    if len(tokens) % 2:
        try:
            _to_coord(tokens[-1])
        except ValueError:
            raise MalformedSourceError(f"{source}: error reading point") from None
    return sorted(pts)


def read_points(filename: str) -> List[Point]:
    try:
        with open(filename, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError:
        raise MalformedSourceError(f"{filename}: error reading point") from None
    except OSError as exc:
        raise SourceIOError(f"{filename}: {exc.strerror or exc}") from exc
    pts = parse_points(text, source=filename)
    logger.debug("Read %d distinct points from %s", len(pts), filename)
    return pts


def format_point(pt: Point) -> str:
    return f"({pt[0]:g},{pt[1]:g})"


def format_points(points: Iterable[Point]) -> str:
    return "\n".join(format_point(p) for p in points)
