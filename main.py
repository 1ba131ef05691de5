import argparse
import sys
from typing import List, Optional

from factorial_calculator import CalculatorSettings, FactorialCalculator, ensure_printable


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute n! for a non-negative integer n.")
    parser.add_argument("n", type=int, nargs="?", help="Target integer")
    parser.add_argument("--max-n", type=int, default=None, help="Largest accepted n (overrides FACTORIAL_MAX_N)")
    parser.add_argument("--serve", action="store_true", help="Run the HTTP API instead of computing once")
    return parser


def serve(settings: CalculatorSettings) -> None:
    """Run the factorial HTTP API with uvicorn."""
    import uvicorn
    uvicorn.run(
        "factorial_calculator.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: print n! or start the server.

    Returns:
        int: Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.serve and args.n is None:
        parser.error("the following arguments are required: n")

    try:
        settings = CalculatorSettings.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.serve:
        serve(settings)
        return 0

    try:
        max_n = args.max_n if args.max_n is not None else settings.max_n
        calculator = FactorialCalculator(max_n=max_n)
        ensure_printable(args.n)
        output = str(calculator.compute_factorial(args.n))
    except (ValueError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
