"""Main entry point for slidespace."""

import argparse
import json
import logging
import sys
from pathlib import Path

from slidespace.errors import BoardLoadError, SlidespaceError
from slidespace.layout.engine import LayoutConfig
from slidespace.model.board import Board
from slidespace.model.presets import DEFAULT_PRESET, PRESETS, load_preset, preset_names
from slidespace.pipeline import GraphLayout, build_graph
from slidespace.search.explorer import ExpansionPolicy
from slidespace.settings import GraphSettings, SearchSettings

logger = logging.getLogger(__name__)


def depth_arg(value: str) -> int:
    """Parse --depth; 0 means unbounded, negatives are rejected."""
    depth = int(value)
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be >= 0, got {depth}")
    return depth


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="slidespace",
        description="Explore a sliding-block puzzle and lay out its state space in 3D",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "board",
        nargs="?",
        type=Path,
        default=None,
        help="Board definition JSON file (default: built-in preset)",
    )
    parser.add_argument(
        "--preset",
        choices=list(PRESETS),
        default=None,
        help=f"Built-in board to use when no file is given (default: {DEFAULT_PRESET})",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the built-in boards and exit",
    )
    parser.add_argument(
        "--depth",
        type=depth_arg,
        default=8,
        metavar="N",
        help="Maximum search depth (>= 0); 0 explores the whole space (default: 8)",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in ExpansionPolicy],
        default=None,
        help=(
            "slide: multi-cell moves, tree edges; unit: one-cell moves, all edges "
            "(default: slide, or unit for boards without a target block)"
        ),
    )
    parser.add_argument(
        "--no-stop",
        action="store_true",
        help="Keep exploring after the target block exits (always on for boards without a target)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=150,
        metavar="N",
        help="Layout relaxation passes (default: 150)",
    )
    parser.add_argument(
        "--spring",
        type=float,
        default=0.1,
        metavar="F",
        help="Spring strength along edges (default: 0.1)",
    )
    parser.add_argument(
        "--center-force",
        type=float,
        default=0.0,
        metavar="F",
        help="Outward force from the centroid (default: 0.0)",
    )
    parser.add_argument(
        "--edge-length",
        type=float,
        default=2.0,
        metavar="F",
        help="Fixed edge length (default: 2.0)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the graph (nodes, edges, positions, path) as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def load_board(path: Path) -> Board:
    """Read and validate a board definition file.

    Raises:
        BoardLoadError: If the file cannot be read or parsed
        ValidationError: If the board is malformed
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise BoardLoadError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise BoardLoadError(path, f"invalid JSON: {e.msg}") from e
    return Board.from_dict(data)


def search_settings(args: argparse.Namespace, board: Board) -> SearchSettings:
    """Build search settings from the command line for a given board.

    Boards without a target block cannot be solved, so they are explored
    freely, with one-cell steps unless --policy says otherwise.
    """
    policy = ExpansionPolicy(args.policy) if args.policy else None
    stop_on_goal = False if args.no_stop else None

    if board.target is None:
        stop_on_goal = False
        policy = policy or ExpansionPolicy.UNIT_STEP
        logger.info(f"Board has no target block, exploring freely ({policy.value})")

    return SearchSettings(
        depth_limit=args.depth or None,
        stop_on_goal=stop_on_goal,
        policy=policy or ExpansionPolicy.SLIDE,
    )


def print_summary(graph: GraphLayout) -> None:
    """Print the outcome, the depth histogram and the boards."""
    print(graph.status)
    for depth, count in sorted(graph.search.depth_counts.items()):
        print(f"  depth {depth}: {count}")

    print()
    print(graph.board.render())
    if graph.search.is_solved:
        moves = ", ".join(move.label for move in graph.search.solution_moves())
        print(f"\nSolution: {moves}\n")
        solved = graph.search.nodes[graph.search.solved_node_id]
        print(graph.board.render(solved.configuration))


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        for name in preset_names():
            print(name)
        return 0

    layout = LayoutConfig(
        iterations=args.iterations,
        spring_strength=args.spring,
        center_force_strength=args.center_force,
        fixed_edge_length=args.edge_length,
    )

    try:
        if args.board is not None:
            board = load_board(args.board)
        else:
            board = load_preset(args.preset or DEFAULT_PRESET)
        search = search_settings(args, board)
        graph = build_graph(board, search, layout)
    except SlidespaceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(graph)

    if args.output is not None:
        data = graph.to_dict()
        data["settings"] = GraphSettings().to_dict()
        try:
            args.output.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
