"""
Luhn mod N Error Detection Analysis

This module measures which transcription errors the check digit catches for
a given base:

- Single-digit substitution: one digit replaced by another value. Every
  substitution is detected in every base, because the permutation table is
  a bijection and (base - 1) is invertible modulo base.
- Adjacent transposition: "ab" written as "ba". Undetected exactly when
  table[a] - a == table[b] - b (mod base). In base 10 this is the classic
  Luhn blind spot, the pair 0/9.
- Twin error: "aa" written as "bb". Undetected when
  a + table[a] == b + table[b] (mod base).

The transposition and twin analyses are closed-form over digit pairs. The
substitution analysis is exhaustive over all sequences of a given length,
which grows as base ** length; keep length small.
"""

import itertools
from typing import Any, Dict, Iterable, List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from luhnmodn.algorithms import compute_check_digit, get_table, validate_base
from luhnmodn.config import MIN_BASE, MAX_BASE
from luhnmodn.log import get_logger, log

logger = get_logger("analysis")


def analyze_substitution_detection(base: int, length: int = 3) -> Dict[str, Any]:
    """
    Exhaustively count single-digit substitutions that go undetected.

    Args:
        base: Base in [2, 16]
        length: Length of the digit sequences to enumerate

    Returns:
        Dictionary with:
        - total_cases: Number of (sequence, position, replacement) triples
        - undetected: Number of triples with an unchanged check digit
        - detection_rate: Fraction of triples detected
        - examples: Up to 10 undetected (original, altered) pairs
    """
    validate_base(base)
    if length < 1:
        raise ValueError("Sequence length must be positive")

    total_cases = 0
    undetected = 0
    examples: List[Tuple[List[int], List[int]]] = []

    for digits in itertools.product(range(base), repeat=length):
        original = list(digits)
        expected = compute_check_digit(original, base)
        for position in range(length):
            for replacement in range(base):
                if replacement == original[position]:
                    continue
                altered = list(original)
                altered[position] = replacement
                total_cases += 1
                if compute_check_digit(altered, base) == expected:
                    undetected += 1
                    if len(examples) < 10:
                        examples.append((original, altered))

    log(
        logger,
        "debug",
        "substitution analysis complete",
        base=base,
        length=length,
        undetected=undetected,
    )

    return {
        "base": base,
        "length": length,
        "total_cases": total_cases,
        "undetected": undetected,
        "detection_rate": 1.0 - undetected / total_cases if total_cases else 1.0,
        "examples": examples,
    }


def analyze_transposition_detection(base: int) -> Dict[str, Any]:
    """
    Find the adjacent transpositions "ab" -> "ba" (a != b) that go undetected.

    Swapping two neighbours always moves one digit into a weighted position
    and the other out of it, so the outcome depends only on the pair.

    Returns:
        Dictionary with the ordered undetected pairs and the detection rate
        over all ordered pairs of unequal digits
    """
    validate_base(base)
    table = get_table(base)

    undetected_pairs = []
    total_pairs = 0
    for a in range(base):
        for b in range(base):
            if a == b:
                continue
            total_pairs += 1
            if (table[a] - a - table[b] + b) % base == 0:
                undetected_pairs.append((a, b))

    return {
        "base": base,
        "total_pairs": total_pairs,
        "undetected_pairs": undetected_pairs,
        "detection_rate": 1.0 - len(undetected_pairs) / total_pairs,
    }


def analyze_twin_error_detection(base: int) -> Dict[str, Any]:
    """
    Find the twin errors "aa" -> "bb" (a != b) that go undetected.

    Returns:
        Dictionary with the ordered undetected pairs and the detection rate
    """
    validate_base(base)
    table = get_table(base)

    undetected_pairs = []
    total_pairs = 0
    for a in range(base):
        for b in range(base):
            if a == b:
                continue
            total_pairs += 1
            if (a + table[a] - b - table[b]) % base == 0:
                undetected_pairs.append((a, b))

    return {
        "base": base,
        "total_pairs": total_pairs,
        "undetected_pairs": undetected_pairs,
        "detection_rate": 1.0 - len(undetected_pairs) / total_pairs,
    }


def generate_detection_report(
    bases: Optional[Iterable[int]] = None,
    console: Optional[Console] = None,
    substitution_length: int = 2,
) -> List[Dict[str, Any]]:
    """
    Print a table of detection rates per base and return the rows.

    Args:
        bases: Bases to analyze (default: every supported base)
        console: Rich console to render on (default: a new stdout console)
        substitution_length: Sequence length for the exhaustive substitution pass

    Returns:
        One dictionary per base with the three detection rates and the
        undetected transposition pairs
    """
    if bases is None:
        bases = range(MIN_BASE, MAX_BASE + 1)
    bases = [validate_base(base) for base in bases]
    if console is None:
        console = Console()

    table = Table(title="Luhn mod N error detection")
    table.add_column("Base", justify="right", style="cyan")
    table.add_column("Substitution", justify="right")
    table.add_column("Transposition", justify="right")
    table.add_column("Twin", justify="right")
    table.add_column("Undetected transpositions", style="yellow")

    rows = []
    for base in bases:
        substitution = analyze_substitution_detection(base, substitution_length)
        transposition = analyze_transposition_detection(base)
        twin = analyze_twin_error_detection(base)

        # Unordered pairs read better than both orderings.
        blind_spots = sorted(
            {tuple(sorted(pair)) for pair in transposition["undetected_pairs"]}
        )
        row = {
            "base": base,
            "substitution_rate": substitution["detection_rate"],
            "transposition_rate": transposition["detection_rate"],
            "twin_rate": twin["detection_rate"],
            "undetected_transpositions": blind_spots,
        }
        rows.append(row)

        table.add_row(
            str(base),
            f"{row['substitution_rate']:.2%}",
            f"{row['transposition_rate']:.2%}",
            f"{row['twin_rate']:.2%}",
            ", ".join(f"{a}/{b}" for a, b in blind_spots) or "-",
        )

    console.print(table)
    return rows
