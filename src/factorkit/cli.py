"""Command-line interface for factorkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

logger = logging.getLogger("factorkit")


def setup_logging(verbose: bool = False, log_path: Optional[Path] = None) -> logging.Logger:
    """Configure the factorkit logger for console and optional file output."""
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def _emit(args: argparse.Namespace, payload: Any, text: str) -> None:
    if args.json:
        print(json.dumps(payload))
    else:
        print(text)


def cmd_primes(args: argparse.Namespace) -> int:
    """Print the first N primes."""
    from factorkit.core.sequencer import first_primes

    logger.debug("Generating first %d primes", args.count)

    primes = first_primes(args.count).tolist()
    _emit(args, {"count": len(primes), "primes": primes}, " ".join(str(p) for p in primes))
    return 0


def cmd_factor(args: argparse.Namespace) -> int:
    """Print the prime factors of each value."""
    from factorkit.core.factorization import factor_exponents, factorize

    results = {}
    lines = []
    for n in args.numbers:
        if args.exponents:
            exponents = factor_exponents(n)
            results[str(n)] = {str(p): k for p, k in exponents.items()}
            terms = [f"{p}^{k}" if k > 1 else str(p) for p, k in exponents.items()]
        else:
            factors = factorize(n)
            results[str(n)] = factors
            terms = [str(p) for p in factors]
        lines.append(f"{n}: {' '.join(terms)}".rstrip())

    _emit(args, {"factors": results}, "\n".join(lines))
    return 0


def cmd_gcd(args: argparse.Namespace) -> int:
    """Print the greatest common divisor of two values."""
    from factorkit.rational.reducer import gcd

    result = gcd(args.a, args.b)
    _emit(args, {"a": args.a, "b": args.b, "gcd": result}, str(result))
    return 0


def cmd_lcm(args: argparse.Namespace) -> int:
    """Print the least common multiple of two values."""
    from factorkit.rational.reducer import lcm

    result = lcm(args.a, args.b)
    _emit(args, {"a": args.a, "b": args.b, "lcm": result}, str(result))
    return 0


def cmd_reduce(args: argparse.Namespace) -> int:
    """Reduce a fraction to lowest terms."""
    from factorkit.rational.reducer import reduce_fraction

    numerator, denominator = reduce_fraction(args.numerator, args.denominator)
    _emit(
        args,
        {"numerator": numerator, "denominator": denominator},
        f"{numerator}/{denominator}",
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="factorkit",
        description="Prime sequencing, factorization and fraction reduction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, default=None, help="Append logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    primes_parser = subparsers.add_parser("primes", help="List the first N primes")
    primes_parser.add_argument("--count", "-n", type=int, default=10, help="Number of primes")

    factor_parser = subparsers.add_parser("factor", help="Factor integers into primes")
    factor_parser.add_argument("numbers", type=int, nargs="+", help="Integers to factor")
    factor_parser.add_argument("--exponents", action="store_true", help="Group factors as p^k")

    gcd_parser = subparsers.add_parser("gcd", help="Greatest common divisor")
    gcd_parser.add_argument("a", type=int, help="First integer")
    gcd_parser.add_argument("b", type=int, help="Second integer")

    lcm_parser = subparsers.add_parser("lcm", help="Least common multiple")
    lcm_parser.add_argument("a", type=int, help="First integer")
    lcm_parser.add_argument("b", type=int, help="Second integer")

    reduce_parser = subparsers.add_parser("reduce", help="Reduce a fraction to lowest terms")
    reduce_parser.add_argument("numerator", type=int, help="Numerator")
    reduce_parser.add_argument("denominator", type=int, help="Denominator")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(verbose=args.verbose, log_path=args.log_file)

    commands = {
        "primes": cmd_primes,
        "factor": cmd_factor,
        "gcd": cmd_gcd,
        "lcm": cmd_lcm,
        "reduce": cmd_reduce,
    }

    try:
        return commands[args.command](args)
    except (ValueError, TypeError, ZeroDivisionError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
