"""Application entry point: a terminal front end over the match controller."""

from __future__ import annotations

import argparse
import logging
import random
import time
from collections.abc import Callable, Sequence

from broadside.game.app.controller import MatchController
from broadside.game.app.state_machine import MatchMode
from broadside.game.infra.app_data import ensure_app_data_dirs
from broadside.game.infra.config import MatchSettings, load_default_env_files
from broadside.game.infra.logging import setup_logging, shutdown_logging
from broadside.game.ui.text_view import parse_coordinate, render_ui_state

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  select N        choose ship N from the placement list
  orient [h|v]    set orientation for the next placement; no argument toggles it
  place B7        place the selected ship with its bow at B7 (or: place 2 7)
  random          place all remaining ships randomly
  fire B7         attack the enemy board
  restart         start a new match
  quit            leave the game"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="broadside", description="Play Battleship in the terminal.")
    parser.add_argument("--two-player", action="store_true", help="two humans on one terminal")
    parser.add_argument("--seed", type=int, default=None, help="seed for random placement and AI")
    parser.add_argument("--delay", type=float, default=None, help="seconds before the computer fires")
    return parser


def resolve_settings(args: argparse.Namespace, base: MatchSettings) -> MatchSettings:
    """Apply CLI overrides over env-derived settings."""
    return MatchSettings(
        mode=MatchMode.TWO_PLAYER if args.two_player else base.mode,
        ai_delay_seconds=max(0.0, args.delay) if args.delay is not None else base.ai_delay_seconds,
        seed=args.seed if args.seed is not None else base.seed,
    )


def handle_command(controller: MatchController, line: str) -> str | None:
    """Apply one console command; returns the message to show, or None to quit."""
    command, _, rest = line.strip().partition(" ")
    command = command.lower()
    if command in {"quit", "exit"}:
        return None
    if command in {"", "help", "?"}:
        return HELP_TEXT
    if command == "select":
        try:
            index = int(rest)
        except ValueError:
            return "Usage: select N"
        return controller.select_ship(index).status
    if command == "orient":
        if not rest.strip():
            current = controller.placement_options().orientation
            return controller.set_orientation(current.toggled()).status
        return controller.set_orientation(rest).status
    if command == "random":
        return controller.place_randomly().status
    if command == "restart":
        controller.restart()
        return controller.status
    if command in {"place", "fire"}:
        coord = parse_coordinate(rest)
        if coord is None:
            return f"Usage: {command} B7"
        if command == "place":
            return controller.place_at(coord.row, coord.col).status
        return controller.attack_at(coord.row, coord.col).status
    return f"Unknown command {command!r}. Type 'help'."


def run_console(
    controller: MatchController,
    *,
    ai_delay_seconds: float,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    sleep_fn: Callable[[float], None] = time.sleep,
) -> int:
    """Read commands until quit or end of input."""
    output_fn(render_ui_state(controller.ui_state()))
    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            return 0
        message = handle_command(controller, line)
        if message is None:
            return 0
        output_fn(message)
        if controller.awaiting_autonomous_move:
            output_fn(render_ui_state(controller.ui_state()))
            sleep_fn(ai_delay_seconds)
            controller.advance(ai_delay_seconds)
        output_fn(render_ui_state(controller.ui_state()))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Broadside terminal game."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    settings = resolve_settings(args, MatchSettings.from_env())
    paths = ensure_app_data_dirs()
    setup_logging()
    logger.info(
        "app_start mode=%s delay=%.2f seed=%s logs=%s",
        settings.mode.name,
        settings.ai_delay_seconds,
        settings.seed,
        paths["logs"],
    )
    controller = MatchController(
        random.Random(settings.seed),
        mode=settings.mode,
        ai_delay_seconds=settings.ai_delay_seconds,
    )
    try:
        return run_console(controller, ai_delay_seconds=settings.ai_delay_seconds)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
