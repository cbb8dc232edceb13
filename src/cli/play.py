"""
Command-line entry point for Fantasy Quest.

Starts the game in the terminal: banner, name prompt, then the campaign
played one scenario at a time.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console

from src.cli.console import ConsoleInput, ConsoleNarrator
from src.content import create_fantasy_quest_campaign, dump_campaign, load_campaign
from src.engine import GameConfig, GameEngine
from src.models.campaign import Campaign, RunResult


class _NamedInput(ConsoleInput):
    """Console input that answers the name prompt without asking."""

    def __init__(self, name: str, console: Console | None = None) -> None:
        super().__init__(console)
        self._name: str | None = name

    def read_line(self, prompt: str = "> ") -> str:
        if self._name is not None:
            name, self._name = self._name, None
            return name.strip()
        return super().read_line(prompt)


def run_game(
    campaign: Campaign | None = None,
    config: GameConfig | None = None,
    character_name: str | None = None,
    console: Console | None = None,
) -> RunResult:
    """
    Run Fantasy Quest in the terminal.

    Args:
        campaign: Campaign to play (defaults to the built-in one)
        config: Game configuration (defaults to the environment)
        character_name: Skip the name prompt and use this name
        console: rich Console to render to
    """
    config = config or GameConfig.from_env()
    console = console or Console(highlight=False)
    inputs = _NamedInput(character_name, console) if character_name else ConsoleInput(console)
    narrator = ConsoleNarrator(console, text_delay_ms=config.text_delay_ms)

    engine = GameEngine(narrator=narrator, inputs=inputs, config=config)
    return engine.run(campaign or create_fantasy_quest_campaign())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fantasy Quest text adventure")
    parser.add_argument("--name", default=None, help="Character name (skips the prompt)")
    parser.add_argument("--campaign", default=None, help="Path to a campaign JSON file")
    parser.add_argument(
        "--export-campaign",
        default=None,
        metavar="PATH",
        help="Write the selected campaign to PATH as JSON and exit",
    )
    parser.add_argument(
        "--text-delay",
        type=int,
        default=None,
        metavar="MS",
        help="Slow-print delay per character in milliseconds",
    )
    parser.add_argument("--fast", action="store_true", help="Disable the slow-print effect")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (logs go to stderr)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, play the game and return the exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        campaign = load_campaign(args.campaign) if args.campaign else None
    except (OSError, ValidationError) as e:
        print(f"Could not load campaign {args.campaign}: {e}", file=sys.stderr)
        return 2

    if args.export_campaign:
        try:
            dump_campaign(campaign or create_fantasy_quest_campaign(), args.export_campaign)
        except OSError as e:
            print(f"Could not export campaign to {args.export_campaign}: {e}", file=sys.stderr)
            return 2
        return 0

    text_delay = 0 if args.fast else args.text_delay
    try:
        config = GameConfig.from_env(text_delay_ms=text_delay)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        run_game(campaign=campaign, config=config, character_name=args.name)
    except KeyboardInterrupt:
        print("\n")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
