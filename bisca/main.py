"""Main entry point for the Bisca simulator."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from bisca.config import load_config
from bisca.errors import ConfigurationError
from bisca.game.engine import create_match, play_match
from bisca.logging import GameLogConfig, GameLogger
from bisca.utils.logger import MatchDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, names: list[str]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_..._{playerN}.jsonl, names in seat order.

    Args:
        log_dir: Directory for log files.
        names: Player names.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    filename = f"{timestamp}_{'_'.join(names)}.jsonl"
    return str(Path(log_dir) / filename)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Bisca card game simulator (2 or 4 players)"
    )
    parser.add_argument(
        "names",
        nargs="*",
        help="Player names in seat order (overrides config)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible match (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)

    # Apply command-line overrides
    if args.names:
        config.game.players = args.names
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"

    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = MatchDisplay()
    names = config.game.players

    try:
        # Validate players before any log file is created
        match = create_match(*names, rng=random.Random(config.game.seed))

        if game_log_enabled:
            log_path = generate_log_filename(game_log_dir, names)
            game_log_config = GameLogConfig(enabled=True, output_path=log_path)
            print(f"Game log: {log_path}")
        else:
            game_log_config = GameLogConfig(enabled=False)

        with GameLogger(game_log_config) as game_logger:
            match.game_logger = game_logger
            display.print_match_start(names, str(match.trump))

            result = play_match(match)

            display.print_result(result)

        return 0

    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Match error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
