"""
Run configuration for the symdiff entry point.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Dict, Optional

from .expression_tree.utils.simplifier import RuleSet
from .logging_system import EngineLogger, LogLevel, configure_logging


@dataclass
class EngineConfig:
    """Settings shared by the command line and programmatic callers."""
    rule_set: RuleSet = RuleSet.MINIMAL
    variable: str = 'x'
    log_level: LogLevel = LogLevel.MINIMAL
    log_to_file: bool = False
    log_file_path: Optional[str] = None
    show_latex: bool = False
    evaluation_point: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> EngineConfig:
        return cls(
            rule_set=RuleSet.from_name(args.rule_set),
            variable=args.variable,
            log_level=LogLevel.from_name(args.log_level),
            log_to_file=args.log_file is not None,
            log_file_path=args.log_file,
            show_latex=args.latex,
            evaluation_point=parse_bindings(args.at or []),
        )

    def apply_logging(self) -> EngineLogger:
        return configure_logging(
            log_level=self.log_level,
            log_to_file=self.log_to_file,
            log_file_path=self.log_file_path,
        )


def parse_bindings(items) -> Dict[str, float]:
    """Turn ``["x=2", "y=3.5"]`` into ``{"x": 2.0, "y": 3.5}``"""
    bindings = {}
    for item in items:
        name, sep, value = item.partition('=')
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got {item!r}")
        try:
            bindings[name] = float(value)
        except ValueError:
            raise ValueError(f"Invalid number for {name!r}: {value!r}") from None
    return bindings
