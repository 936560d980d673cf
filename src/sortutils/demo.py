"""
Self-check demo: exercises every array utility on small fixed inputs.

Usage (from repo root):
    python -m sortutils.demo --seed 7 --size 5 --runs 5

Scenarios (each one verified with the contract checks, so a broken utility
aborts the demo with a ContractViolation):
    - swap([2,4,1,3,5], 0, 2) == [1,4,2,3,5]
    - is_sorted([1,2,3,4,5])
    - reverse_array([5,4,3,2,1]) == [1,2,3,4,5]
    - generate_array(size), `runs` times
    - empty_array(empty_size)

Output:
    - (console) one line per scenario plus a rich summary table
    - (log) reverse_array before/after line when --verbose is given
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from sortutils.arrays import (
    cut,
    empty_array,
    generate_array,
    label,
    render,
    reverse_array,
    swap,
)
from sortutils.contracts import (
    assert_identical,
    assert_non_negative,
    assert_sorted,
)
from sortutils.ordering import is_sorted


# ------------------------- data structures ------------------------- #

@dataclass
class DemoReport:
    swapped: List[int] = field(default_factory=list)
    sorted_ok: bool = False
    reversed_: List[int] = field(default_factory=list)
    halves: List[List[int]] = field(default_factory=list)
    generated: List[List[int]] = field(default_factory=list)
    blanks: List[str] = field(default_factory=list)


# ------------------------- core demo ------------------------- #

def run_demo(
    *,
    size: int = 5,
    runs: int = 5,
    empty_size: int = 10,
    rng: Optional[np.random.Generator] = None,
    console: Optional[Console] = None,
) -> DemoReport:
    """
    Run every scenario and return what each one produced.

    Raises ContractViolation as soon as a scenario disagrees with its
    expected result.
    """
    assert_non_negative(runs, "runs")
    out = console if console is not None else Console()
    report = DemoReport()

    # swap
    target = [2, 4, 1, 3, 5]
    check = [1, 4, 2, 3, 5]
    out.print(f"Before swap({render(target)}, 0, 2)")
    swap(target, 0, 2)
    out.print(f"After swap(..., 0, 2): {render(target)}")
    assert_identical(target, check)
    report.swapped = target

    # sortedness
    ordered = [1, 2, 3, 4, 5]
    report.sorted_ok = is_sorted(ordered)
    out.print(f"Is array {render(ordered)} sorted? {report.sorted_ok}")
    assert_sorted(ordered, False)

    # reversal
    source = [5, 4, 3, 2, 1]
    check = [1, 2, 3, 4, 5]
    out.print(f"Array {render(source)} should be reverse of {render(check)}.")
    report.reversed_ = reverse_array(source)
    assert_identical(report.reversed_, check)

    # cut
    left, right = cut(check)
    out.print(f"cut({render(check)}): {render(left)} | {render(right)}")
    assert_identical(left + right, check)
    report.halves = [left, right]

    # generation
    out.print(f"Testing generate_array({size}), {runs} time(s).")
    for i in range(runs):
        arr = generate_array(size, rng)
        out.print(f"[{i + 1}] generate_array({size}): {render(arr)}")
        report.generated.append(arr)

    report.blanks = empty_array(empty_size)
    out.print(f"empty_array({empty_size}): {render(report.blanks)}")

    _print_summary(out, report, size=size, runs=runs)
    return report


def _print_summary(console: Console, report: DemoReport, *, size: int, runs: int) -> None:
    table = Table(title="Array Utilities Demo")
    table.add_column("Scenario", style="bold")
    table.add_column("Result", justify="right")
    table.add_row("swap", render(report.swapped))
    table.add_row("is_sorted", str(report.sorted_ok))
    table.add_row("reverse_array", render(report.reversed_))
    table.add_row("cut", " | ".join(render(h) for h in report.halves))
    table.add_row("generate_array", f"{label('size', size)} {label('runs', runs)}")
    table.add_row("empty_array", label("length", len(report.blanks)))
    console.print()
    console.print(table)
    console.print()


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Exercise the sortutils array utilities.")
    p.add_argument("--seed", type=int, default=None, help="Seed for generate_array (default: shared unseeded RNG)")
    p.add_argument("--size", type=int, default=5, help="Size passed to generate_array")
    p.add_argument("--runs", type=int, default=5, help="Number of generate_array calls")
    p.add_argument("--empty-size", type=int, default=10, help="Size passed to empty_array")
    p.add_argument("--verbose", action="store_true", help="Log DEBUG lines (e.g. reverse_array before/after)")
    return p.parse_args(argv)


def _attach_log_handler(verbose: bool, console: Console) -> Tuple[logging.Handler, int]:
    """Route sortutils log records to `console`; returns what to undo afterwards."""
    pkg_logger = logging.getLogger("sortutils")
    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = pkg_logger.level
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler, previous_level


def _detach_log_handler(handler: logging.Handler, previous_level: int) -> None:
    pkg_logger = logging.getLogger("sortutils")
    pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(previous_level)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> DemoReport:
    args = _parse_args(argv)
    out = console if console is not None else Console()
    handler, previous_level = _attach_log_handler(args.verbose, out)

    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    try:
        report = run_demo(
            size=args.size,
            runs=args.runs,
            empty_size=args.empty_size,
            rng=rng,
            console=out,
        )
    except Exception as e:
        out.print(f"[bold red]Demo failed:[/bold red] {escape(repr(e))}")
        raise
    finally:
        _detach_log_handler(handler, previous_level)
    out.print("[bold green]Done.[/bold green]")
    return report


def _cli() -> None:
    main()


if __name__ == "__main__":
    _cli()
