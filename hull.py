import argparse
import logging
import sys
import time
from typing import List, Optional

from errors import HullError
from geometry import find_hull
from log import configure_logger
from point_io import format_points, read_points

logger = logging.getLogger(__name__)

DESCRIPTION = """\
It is assumed that each line of <infile> contains
a point of form x y where x and y are real numbers."""


def _wrong_file_count(message: str) -> bool:
    if message.endswith("required: infile"):
        return True
    prefix = "unrecognized arguments: "
    if message.startswith(prefix):
        extra = message[len(prefix):].split()
        return all(not arg.startswith("-") for arg in extra)
    return False


class HullArgumentParser(argparse.ArgumentParser):
    """Reports a missing or extra file name the way the usage text reads."""

    def error(self, message):
        if _wrong_file_count(message):
            message = "Invalid number of arguments."
        self.exit(2, f"{message}\n\n{self.format_help()}")


def build_parser() -> argparse.ArgumentParser:
    parser = HullArgumentParser(
        prog="bf-hull",
        description="Find the points on the convex hull of a set of points "
                    "and print them in lexicographic order.",
        epilog=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("infile", help="file containing points")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debugging details.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    parser.add_argument("--no-timing", action="store_true", help="Do not print the elapsed time.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(log_file=args.log_file, verbose=args.verbose)

    try:
        pts = read_points(args.infile)

        start = time.perf_counter()
        hull_pts = find_hull(pts)
        elapsed_us = int((time.perf_counter() - start) * 1e6)
    except HullError as exc:
        logger.error(str(exc))
        return 1

    logger.debug("Hull of %d points has %d vertices", len(pts), len(hull_pts))
    print(f"Convex Hull ({len(hull_pts)} Points):")
    print(format_points(hull_pts))
    if not args.no_timing:
        print(f"Elapsed Time (microseconds): {elapsed_us}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
