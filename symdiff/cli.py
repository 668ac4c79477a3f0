#!/usr/bin/env python3
"""
Differentiate a fixed set of sample expressions and print the results.

Usage:
    python -m symdiff
    python -m symdiff --rule-set extended --latex
    python -m symdiff --at x=2 y=3
"""

import argparse
import sys
from typing import List, Optional

from .config import EngineConfig
from .expression_tree import (
    Node, Constant, Variable, Mul, Div, Exp, Log, ONE, RuleSet,
    UnboundVariableError, differentiate, evaluate
)
from .expression_tree.utils.sympy_utils import latex_representation
from .logging_system import LogLevel


def sample_expressions() -> List[Node]:
    """The demonstration expressions, built directly without a parser."""
    x = Variable('x')
    y = Variable('y')
    return [
        Mul(x, y),
        Div(x, y),
        Exp(Mul(x, y)),
        Log(Mul(x, Div(y, Constant(2.0)))),
        Mul(Mul(Constant(3.0), y), x),
        Mul(Mul(ONE, Constant(3.0)), Log(Mul(x, Div(y, Constant(2.0))))),
        Div(x, Log(Mul(Constant(3.0), Constant(5.0)))),
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Symbolic differentiation of sample expressions")
    parser.add_argument("--variable", default="x", help="Variable to differentiate by (default: x)")
    parser.add_argument("--rule-set", default="minimal", choices=[r.value for r in RuleSet],
                        help="Simplification rules applied to each derivative")
    parser.add_argument("--log-level", default="minimal",
                        choices=[level.name.lower() for level in LogLevel],
                        help="Logging verbosity (engine traces appear at detailed/verbose)")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument("--latex", action="store_true", help="Print a LaTeX form of each derivative")
    parser.add_argument("--at", nargs="*", metavar="NAME=VALUE",
                        help="Evaluate each derivative at this point")
    return parser


def run(config: EngineConfig) -> int:
    logger = config.apply_logging()
    samples = sample_expressions()
    logger.milestone(f"Differentiating {len(samples)} samples by {config.variable}")

    for expr in samples:
        derivative = differentiate(expr, config.variable, config.rule_set)
        print(f"{expr}'({config.variable}) = {derivative}")
        if config.show_latex:
            print(f"    latex: {latex_representation(derivative)}")
        if config.evaluation_point:
            try:
                value = evaluate(derivative, config.evaluation_point)
            except UnboundVariableError as e:
                logger.critical(f"Cannot evaluate {derivative}: {e}")
                return 1
            print(f"    at {config.evaluation_point}: {value}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = EngineConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
