"""Command line demonstration of building, unbalancing and rebalancing a tree.

The script draws distinct random integers, builds an ``OrderedTree`` from
them and prints its structure, balance status and the four traversal orders.
It then inserts a run of ascending values above the random range to skew the
tree, prints it again, rebalances and prints the final state.

The heavy lifting lives in ``ordered_tree``; this module only orchestrates the
flow and formats human-readable output.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Callable, List, Sequence

from ordered_tree import (
    RENDERERS,
    DemoConfig,
    DemoConfigError,
    OrderedTree,
    load_demo_config,
    random_distinct_values,
)

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]


def _format_balance(tree: OrderedTree) -> str:
    return f"Is tree balanced? {'Yes' if tree.is_balanced() else 'No'}"


def _format_orders(tree: OrderedTree) -> List[str]:
    """Return one line per traversal order, collected through visitors."""

    lines: List[str] = []
    for label, traverse in (
        ("Level Order:", tree.level_order),
        ("Pre Order:  ", tree.pre_order),
        ("Post Order: ", tree.post_order),
        ("In Order:   ", tree.in_order),
    ):
        values: List[object] = []
        traverse(values.append)
        lines.append(f"{label} {', '.join(str(value) for value in values)}")
    return lines


def run_demo(config: DemoConfig, emit: Emit = print) -> OrderedTree:
    """Execute the demonstration flow for *config* and return the final tree."""

    render = RENDERERS[config.style]
    rng = random.Random(config.seed)
    initial = random_distinct_values(config.count, config.upper_bound, rng)
    logger.info("Generated %d values (seed=%s)", len(initial), config.seed)

    tree = OrderedTree.build(initial)
    emit("--- Initial Tree Created ---")
    emit(render(tree.root))
    emit("")
    emit(_format_balance(tree))
    for line in _format_orders(tree):
        emit(line)

    if config.unbalancing_values:
        emit("")
        emit(
            "--- Adding "
            + ", ".join(str(value) for value in config.unbalancing_values)
            + " to unbalance ---"
        )
        for value in config.unbalancing_values:
            tree.insert(value)
        emit(render(tree.root))
        emit("")
        emit(_format_balance(tree))

    emit("")
    emit("--- Rebalancing Tree ---")
    tree.rebalance()
    if not tree.is_balanced():
        raise RuntimeError("Rebalanced tree failed the balance check")
    emit(render(tree.root))
    emit("")
    emit(_format_balance(tree))
    for line in _format_orders(tree):
        emit(line)
    return tree


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for the tree balancing demonstration."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON or YAML file with demo settings. Flags override file values.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of distinct random values to build the tree from.",
    )
    parser.add_argument(
        "--upper-bound",
        type=int,
        default=None,
        help="Random values are drawn from [0, UPPER_BOUND).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator to make runs reproducible.",
    )
    parser.add_argument(
        "--style",
        choices=sorted(RENDERERS),
        default=None,
        help="Tree rendering style.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = load_demo_config(args.config).with_overrides(
            count=args.count,
            upper_bound=args.upper_bound,
            seed=args.seed,
            style=args.style,
        )
    except DemoConfigError as exc:
        logger.error("Invalid demo configuration: %s", exc)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    run_demo(config)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
