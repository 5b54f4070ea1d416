"""
Alternating Disks Deterministic Runner

Sections:
  - construct: build the alternating row, prove its layout
  - sort: run one sorter, prove sortedness and the swap-count oracle

Each section is a zero-argument builder returning Receipts, so solve()
can build it once and solve_with_determinism_check() can build it twice
through assert_double_run_equal().
"""

from typing import Callable, Tuple, Dict

from .core import Receipts, assert_double_run_equal
from .kernel import (
    DISK_LIGHT,
    DISK_DARK,
    DiskState,
    ALGORITHMS,
    expected_swap_count
)


DEFAULT_ALGORITHM = "left-to-right"


# ============================================================================
# Sections
# ============================================================================

def _construct_section(light_count: int) -> Receipts:
    """Build the alternating row and its construct receipt."""
    state = DiskState(light_count)

    receipts = Receipts("construct")
    receipts.put("light_count", state.light_count())
    receipts.put("dark_count", state.dark_count())
    receipts.put("total_count", state.total_count())
    receipts.put_state("state", state)
    receipts.put("is_alternating", state.is_alternating())
    receipts.put("is_sorted", state.is_sorted())
    return receipts


def _sort_section(light_count: int, algorithm: str) -> Receipts:
    """Sort a fresh alternating row with one sorter and build its sort receipt."""
    before = DiskState(light_count)
    result = ALGORITHMS[algorithm](before)
    after = result.after
    expected = expected_swap_count(light_count)

    receipts = Receipts(f"sort-{algorithm}")
    receipts.put("algorithm", algorithm)
    receipts.put_state("before", before)
    receipts.put_state("after", after)
    receipts.put("swap_count", result.swap_count)
    receipts.put("expected_swap_count", expected)
    receipts.put("oracle_ok", result.swap_count == expected)
    receipts.put("is_sorted", after.is_sorted())
    receipts.put("colors_preserved",
                 (after.count(DISK_LIGHT) == before.count(DISK_LIGHT)
                  and after.count(DISK_DARK) == before.count(DISK_DARK)))
    return receipts


def _sections(light_count: int, algorithm: str) -> Dict[str, Callable[[], Receipts]]:
    if algorithm not in ALGORITHMS:
        raise ValueError(
            f"Runner: Unknown algorithm '{algorithm}'. Choose from: {', '.join(ALGORITHMS)}"
        )
    return {
        "construct": lambda: _construct_section(light_count),
        "sort": lambda: _sort_section(light_count, algorithm),
    }


def _check_sorted(receipts_bundle: Dict) -> str:
    """Return the sorted row rendering; raise RuntimeError on a failed postcondition."""
    payload = receipts_bundle["sort"]["payload"]
    algorithm = payload["algorithm"]
    if not payload["is_sorted"]:
        raise RuntimeError(f"Runner: {algorithm} left row unsorted: {payload['after']}")
    if not payload["colors_preserved"]:
        raise RuntimeError(f"Runner: {algorithm} changed the color counts")
    return payload["after"]


# ============================================================================
# Solve
# ============================================================================

def solve(
    light_count: int,
    algorithm: str = DEFAULT_ALGORITHM
) -> Tuple[str, Dict]:
    """
    Construct an alternating row of light_count light disks and sort it.

    Args:
        light_count: Number of light disks (k >= 1).
        algorithm: Sorter name, "left-to-right" or "lawnmower".

    Returns:
        Tuple of (after, receipts_bundle):
          - after: Debug rendering of the sorted row ("L L D D").
          - receipts_bundle: {"construct": digest, "sort": digest}

    Raises:
        ValueError: If algorithm is unknown.
        PreconditionError: If light_count < 1.
        RuntimeError: If the sorted row fails its postconditions.
    """
    receipts_bundle = {
        name: build().digest()
        for name, build in _sections(light_count, algorithm).items()
    }
    return (_check_sorted(receipts_bundle), receipts_bundle)


def solve_with_determinism_check(
    light_count: int,
    algorithm: str = DEFAULT_ALGORITHM
) -> Tuple[str, Dict]:
    """
    Like solve(), but every section is built twice and must hash identically.

    Returns:
        Tuple of (after, receipts_bundle) with determinism flags added.

    Raises:
        DeterminismError: If a section differs between the two builds.
    """
    sections = _sections(light_count, algorithm)
    receipts_bundle = {
        name: assert_double_run_equal(build)
        for name, build in sections.items()
    }
    after = _check_sorted(receipts_bundle)

    receipts_bundle["determinism.double_run_ok"] = True
    receipts_bundle["determinism.sections_checked"] = len(sections)

    return (after, receipts_bundle)


# ============================================================================
# CLI Entry Point
# ============================================================================

def main(argv=None):
    """CLI entry point: construct, sort and print receipts as JSON."""
    import argparse
    import json
    import sys

    from .core import DeterminismError
    from .kernel import ContractError

    parser = argparse.ArgumentParser(
        description="Sort an alternating row of light/dark disks with adjacent swaps.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  disksort 4
  disksort 4 --algorithm lawnmower
  disksort 10 --algorithm both --determinism-check --output receipts.json
"""
    )

    parser.add_argument(
        "light_count",
        type=int,
        help="Number of light disks k (row length is 2k)."
    )

    parser.add_argument(
        "--algorithm",
        choices=list(ALGORITHMS) + ["both"],
        default=DEFAULT_ALGORITHM,
        help=f"Sorter to run. Default: {DEFAULT_ALGORITHM}."
    )

    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Build every section twice and compare hashes. Default: False."
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for results JSON. Default: print to stdout."
    )

    args = parser.parse_args(argv)

    if args.algorithm == "both":
        algorithms = list(ALGORITHMS)
    else:
        algorithms = [args.algorithm]

    run = solve_with_determinism_check if args.determinism_check else solve

    results = {}
    try:
        for name in algorithms:
            after, receipts = run(args.light_count, name)
            results[name] = {
                "after": after,
                "swap_count": receipts["sort"]["payload"]["swap_count"],
                "receipts": receipts
            }
    except (ContractError, DeterminismError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for name, res in results.items():
        print(f"{name}: {res['after']} ({res['swap_count']} swaps)", file=sys.stderr)

    if args.output:
        try:
            with open(args.output, 'w') as f:
                json.dump(results, f, indent=2)
        except OSError as e:
            print(f"Error: Cannot write results to {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"Results written to: {args.output}", file=sys.stderr)
    else:
        print(json.dumps(results, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
