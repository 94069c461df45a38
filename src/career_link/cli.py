# Area: Shared
"""
career_link.cli — Command-line interface
========================================

Provides the CLI entry point for playing Career Link in the terminal.

Usage:
    career-link --demo                      # Play offline with the demo client
    career-link --config config.json        # Play against the AI service
    python -m career_link --demo --strict   # Surface gateway errors

Demo mode can be enabled via:
    1. CLI flag: --demo
    2. Config key: demo_mode: true
    3. Environment variable: DEMO_MODE=true
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from .config import load_config, validate_config
from .runner import GameRunner
from ._ui import ConsoleUI


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="career-link",
        description="Career Link - name the player who links two football clubs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  career-link --demo
  career-link --config config.json
  career-link --strict --model claude-3-5-sonnet-latest
  DEMO_MODE=true career-link
        """,
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run in demo mode using the offline demo client (no API key needed)",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Show gateway errors instead of falling back to default rounds",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Path to the JSON log file (default: career_link.log)",
    )

    parser.add_argument(
        "--model",
        type=str,
        help="Model name to request challenges and verdicts from",
    )

    return parser.parse_args(argv)


def apply_args(args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay CLI flags on the loaded config. Flags win."""
    if args.demo:
        config["demo_mode"] = True
    if args.strict:
        config["strict_gateway"] = True
    if args.log_file:
        config["log_file"] = args.log_file
    if args.model:
        config["model"] = args.model
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = apply_args(args, load_config(args.config))
        validate_config(config)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Set via config file, environment variables or CLI flags.", file=sys.stderr)
        return 1

    runner = GameRunner(config=config, ui=ConsoleUI())
    runner.run()
    return 0
