import argparse
import json
import logging
import sys
from typing import Dict, List, Optional, Sequence

from trisolve import (
    InvalidCoordinate,
    distance,
    round_to_precision,
    solve,
    solve_points,
)
from trisolve.plotting import render_solution

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_assignments(parser: argparse.ArgumentParser, items: Sequence[str]) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for item in items:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            parser.error(f"expected NAME=VALUE, got {item!r}")
        params[name.strip()] = value.strip()
    return params


def _parse_point(text: str) -> List[str]:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}")
    return parts


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve triangles from sides, angles or vertices")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Decimals kept in the printed values, negative to disable rounding (default: 6)",
    )
    parser.add_argument(
        "--plot-output-path",
        help="Write a PNG drawing of the first solution to the given path",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    solve_cmd = commands.add_parser("solve", help="Solve from sides and angles, e.g. a=3 b=4 gamma=90")
    solve_cmd.add_argument("params", nargs="+", metavar="NAME=VALUE")
    solve_cmd.add_argument("--mode", choices=["deg", "rad"], default=None)

    points_cmd = commands.add_parser("points", help="Solve from three vertices, e.g. 0,0 3,0 0,4")
    points_cmd.add_argument("vertices", nargs=3, type=_parse_point, metavar="X,Y")
    points_cmd.add_argument("--mode", choices=["deg", "rad"], default="deg")

    distance_cmd = commands.add_parser("distance", help="Distance between two points")
    distance_cmd.add_argument("endpoints", nargs=2, type=_parse_point, metavar="X,Y")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.command == "distance":
        try:
            value = distance(*args.endpoints)
        except InvalidCoordinate as exc:
            logger.error("%s", exc)
            raise SystemExit(1)
        print(round_to_precision(value, args.precision))
        return

    if args.command == "solve":
        params = _parse_assignments(parser, args.params)
        if args.mode is not None:
            params["mode"] = args.mode
        result = solve(params)
    else:
        result = solve_points(*args.vertices, mode=args.mode)

    print(json.dumps(result.to_dict(precision=args.precision), indent=2))

    if result.error is not None:
        logger.error("%s", result.error.message)
        raise SystemExit(1)

    if args.plot_output_path:
        render_solution(result, args.plot_output_path)


if __name__ == "__main__":
    main(sys.argv[1:])
