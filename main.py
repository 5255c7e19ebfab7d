#!/usr/bin/env python3
"""
ripsgrid: Homology of Vietoris-Rips complexes on integer grids

Usage:
    # Analyze points from JSON file
    python main.py analyze --input problem.json --output result.json

    # Analyze points from command line
    python main.py analyze --points "0,0;0,2;2,2;2,0" --epsilon 2

    # Random board
    python main.py random --board 9 --count 9 --epsilon 3 --seed 7

    # Run demos
    python main.py demo --example square

    # Run tests
    python main.py test
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import numpy as np

from ripsgrid import __version__, analyze, random_points
from ripsgrid.analysis import TopologyResult
from ripsgrid.config import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_EPSILON,
    DEFAULT_POINT_COUNT,
    DEFAULT_TARGET_HOLES,
)
from ripsgrid.geometry.points import Point, as_points, parse_points_string
from ripsgrid.utils.logging import setup_logging

logger = logging.getLogger("ripsgrid.cli")


def load_problem_from_json(filepath: str) -> Tuple[List[Point], int]:
    """
    Load a point set and threshold from JSON file.

    Expected format:
    {
        "epsilon": 2,
        "points": [[0, 0], [0, 2], [2, 2], [2, 0]]
    }
    """
    with open(filepath, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{filepath}: expected a JSON object")
    if "points" not in data:
        raise ValueError(f"{filepath}: missing 'points'")
    if not isinstance(data["points"], list):
        raise ValueError(f"{filepath}: 'points' must be a list of [row, col] pairs")
    points = as_points(data["points"])
    epsilon = data.get("epsilon", DEFAULT_EPSILON)
    return points, epsilon


def save_result_to_json(filepath: str, result: TopologyResult) -> None:
    """Save analysis result to JSON file."""
    with open(filepath, 'w') as f:
        json.dump(result.to_dict(), f, indent=2)


def render_board(points: List[Point], board_size: int) -> List[str]:
    """Text rendering of stones on a board ('o' = stone, '.' = empty)."""
    occupied = {p.as_tuple() for p in points}
    rows = []
    for r in range(board_size):
        rows.append(" ".join("o" if (r, c) in occupied else "." for c in range(board_size)))
    return rows


def print_result(result: TopologyResult, show_holes: bool = False) -> None:
    cx = result.complex
    print(f"\nComplex at epsilon = {cx.epsilon}:")
    print(f"  Vertices:  {cx.num_vertices}")
    print(f"  Edges:     {cx.num_edges}")
    print(f"  Triangles: {cx.num_triangles}")
    print(f"\nBetti numbers:")
    print(f"  beta0 (components) = {result.beta0}")
    print(f"  beta1 (holes)      = {result.beta1}")

    if show_holes and result.beta1:
        print("\nHole representatives:")
        for i, edges in enumerate(result.hole_edge_sets()):
            loop = ", ".join(f"{cx.vertices[e.u].key}-{cx.vertices[e.v].key}" for e in edges)
            print(f"  hole {i}: [{loop}]")


def cmd_analyze(args):
    """Execute the analyze command."""
    try:
        if args.input:
            print(f"Loading problem from: {args.input}")
            points, epsilon = load_problem_from_json(args.input)
            if args.epsilon is not None:
                epsilon = args.epsilon
        elif args.points:
            points = parse_points_string(args.points)
            epsilon = args.epsilon if args.epsilon is not None else DEFAULT_EPSILON
        else:
            print("Error: Must specify either --input FILE or --points")
            return 1

        print(f"\nPoint set: {len(points)} points")
        result = analyze(points, epsilon)
        print_result(result, show_holes=args.show_holes)

        if args.output:
            save_result_to_json(args.output, result)
            print(f"\nResults saved to: {args.output}")
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0


def cmd_random(args):
    """Execute the random command."""
    try:
        points = random_points(args.board, args.count, seed=args.seed)
        result = analyze(points, args.epsilon)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Random board {args.board}x{args.board}, {len(points)} stones:")
    for line in render_board(points, args.board):
        print(f"  {line}")
    print_result(result, show_holes=args.show_holes)

    if result.beta1 >= args.target and points:
        print(f"\nTarget of {args.target} holes reached.")

    if args.output:
        try:
            save_result_to_json(args.output, result)
        except OSError as e:
            print(f"Error: {e}")
            return 1
        print(f"\nResults saved to: {args.output}")
    return 0


def _square(r0: int, c0: int, side: int) -> List[Tuple[int, int]]:
    return [(r0, c0), (r0, c0 + side), (r0 + side, c0 + side), (r0 + side, c0)]


def _check(result: TopologyResult, expected: Dict[str, Any]) -> bool:
    cx = result.complex
    observed = {
        "edges": cx.num_edges,
        "triangles": cx.num_triangles,
        "beta0": result.beta0,
        "beta1": result.beta1,
    }
    ok = True
    print("\nVerification:")
    for key, want in expected.items():
        got = observed[key]
        match = got == want
        ok = ok and match
        print(f"  {key}: {got} (expected {want}) {'ok' if match else 'MISMATCH'}")
    return ok


def demo_square():
    """Demo: hollow square, one hole"""
    print("=" * 60)
    print("Demo: Hollow Square (epsilon = 2)")
    print("=" * 60)

    points = _square(0, 0, 2)
    print("\n  o . o")
    print("  . . .")
    print("  o . o")
    print("  Sides have length 2, diagonals length 4")

    result = analyze(points, 2)
    print_result(result, show_holes=True)
    return _check(result, {"edges": 4, "triangles": 0, "beta0": 1, "beta1": 1})


def demo_filled_square():
    """Demo: square whose diagonals are within epsilon"""
    print("=" * 60)
    print("Demo: Filled Square (epsilon = 4)")
    print("=" * 60)

    points = _square(0, 0, 2)
    print("\n  Same corners, diagonals now within epsilon")

    result = analyze(points, 4)
    print_result(result, show_holes=True)
    return _check(result, {"edges": 6, "triangles": 4, "beta0": 1, "beta1": 0})


def demo_two_squares():
    """Demo: two far-apart hollow squares"""
    print("=" * 60)
    print("Demo: Two Hollow Squares (epsilon = 2)")
    print("=" * 60)

    points = _square(0, 0, 2) + _square(0, 10, 2)
    print("\n  Squares at columns 0..2 and 10..12")

    result = analyze(points, 2)
    print_result(result, show_holes=True)
    return _check(result, {"edges": 8, "triangles": 0, "beta0": 2, "beta1": 2})


def demo_ring():
    """Demo: ring of stones around an empty center"""
    print("=" * 60)
    print("Demo: Ring of 8 stones (epsilon = 1)")
    print("=" * 60)

    points = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0)]
    for line in render_board(as_points(points), 3):
        print(f"  {line}")

    result = analyze(points, 1)
    print_result(result, show_holes=True)
    return _check(result, {"edges": 8, "triangles": 0, "beta0": 1, "beta1": 1})


def cmd_demo(args):
    """Execute the demo command."""
    demos = {
        "square": demo_square,
        "filled": demo_filled_square,
        "two-squares": demo_two_squares,
        "ring": demo_ring,
    }

    if args.example == "all":
        results = []
        for name, func in demos.items():
            passed = func()
            results.append((name, passed))
            print()

        print("=" * 60)
        print("Summary")
        print("=" * 60)
        all_passed = True
        for name, passed in results:
            status = "PASS" if passed else "FAIL"
            print(f"  {name}: {status}")
            if not passed:
                all_passed = False

        return 0 if all_passed else 1

    elif args.example in demos:
        passed = demos[args.example]()
        return 0 if passed else 1
    else:
        print(f"Unknown example: {args.example}")
        print(f"Available: {', '.join(demos.keys())}, all")
        return 1


def cmd_test(args):
    """Execute the test command."""
    import subprocess

    test_dir = Path(__file__).parent / "tests"
    if not test_dir.exists():
        print(f"Test directory not found: {test_dir}")
        return 1

    cmd = [sys.executable, "-m", "pytest", str(test_dir)]
    if args.verbose:
        cmd.append("-v")
    if args.coverage:
        cmd.extend(["--cov=ripsgrid", "--cov-report=term-missing"])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def cmd_info(args):
    """Display system information."""
    print(f"ripsgrid v{__version__}")
    print("Vietoris-Rips homology of stones on an integer grid")
    print()
    print("Computes:")
    print("  beta0 - connected components (union-find)")
    print("  beta1 - independent holes (GF(2) reduction of fundamental cycles)")
    print("  one edge-set representative per hole")
    print()
    print("Python:", sys.version.split()[0])
    print("NumPy:", np.__version__)

    import scipy
    print("SciPy:", scipy.__version__)

    import networkx
    print("NetworkX:", networkx.__version__)

    return 0


def main():
    parser = argparse.ArgumentParser(
        prog="ripsgrid",
        description="ripsgrid: Vietoris-Rips homology on integer grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a JSON problem file
  ripsgrid analyze --input problem.json --output result.json

  # Analyze points given on the command line
  ripsgrid analyze --points "0,0;0,2;2,2;2,0" --epsilon 2 --show-holes

  # Random board
  ripsgrid random --board 9 --count 12 --epsilon 3 --seed 1

  # Run demos
  ripsgrid demo --example square
  ripsgrid demo --example all

  # Run tests
  ripsgrid test -v
"""
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"ripsgrid {__version__}"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a point set")
    analyze_parser.add_argument("--input", "-i", type=str, help="Input JSON file")
    analyze_parser.add_argument("--output", "-o", type=str, help="Output JSON file")
    analyze_parser.add_argument("--points", "-p", type=str, help="Points spec: '0,0;0,2;2,2'")
    analyze_parser.add_argument(
        "--epsilon", "-e",
        type=int,
        default=None,
        help=f"Taxicab threshold (default: from input file, else {DEFAULT_EPSILON})"
    )
    analyze_parser.add_argument("--show-holes", action="store_true", help="Print hole representatives")

    # Random command
    random_parser = subparsers.add_parser("random", help="Analyze a random board")
    random_parser.add_argument("--board", "-n", type=int, default=DEFAULT_BOARD_SIZE, help="Board size")
    random_parser.add_argument("--count", "-k", type=int, default=DEFAULT_POINT_COUNT, help="Number of stones")
    random_parser.add_argument("--epsilon", "-e", type=int, default=DEFAULT_EPSILON, help="Taxicab threshold")
    random_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    random_parser.add_argument(
        "--target", "-t",
        type=int,
        default=DEFAULT_TARGET_HOLES,
        help=f"Hole count to report as reached (default: {DEFAULT_TARGET_HOLES})"
    )
    random_parser.add_argument("--output", "-o", type=str, help="Output JSON file")
    random_parser.add_argument("--show-holes", action="store_true", help="Print hole representatives")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demonstration examples")
    demo_parser.add_argument(
        "--example", "-e",
        choices=["square", "filled", "two-squares", "ring", "all"],
        default="all",
        help="Which example to run (default: all)"
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run test suite")
    test_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    test_parser.add_argument("--coverage", "-c", action="store_true", help="With coverage")

    # Info command
    subparsers.add_parser("info", help="Show system information")

    args = parser.parse_args()
    setup_logging(args.log_level, args.log_file)

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug("command: %s", args.command)
    if args.command == "analyze":
        return cmd_analyze(args)
    elif args.command == "random":
        return cmd_random(args)
    elif args.command == "demo":
        return cmd_demo(args)
    elif args.command == "test":
        return cmd_test(args)
    elif args.command == "info":
        return cmd_info(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
