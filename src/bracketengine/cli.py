"""Command-line interface for Bracket Engine.

This module drives the bracket engine from a terminal: inspect the bracket,
validate results, generate rounds, and manage the local copy.
"""

# Bracket Engine
# Copyright (C) 2025  Bracket Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import os
import sys
from typing import List, Optional

from bracketengine.constants import (
    DEFAULT_ACTOR,
    DEFAULT_DATA_FILE,
    DEFAULT_REMOTE_URL,
    ENV_DATA_FILE,
    ENV_REMOTE_URL,
    ROUND_NAMES,
    ROUND_ORDER,
)
from bracketengine.exceptions import BracketEngineException
from bracketengine.models.match import Match
from bracketengine.models.tournament import Tournament
from bracketengine.storage import (
    JsonFileStore,
    RemoteSource,
    load_data,
    reset_data,
    save_data,
)
from bracketengine.utils import setup_logger

logger = setup_logger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _player_name(tournament: Tournament, player_id: Optional[str]) -> str:
    player = tournament.get_player(player_id) if player_id else None
    return player.name if player else f"? ({player_id})"


def format_match(tournament: Tournament, match: Match) -> str:
    """One-line summary of a match for terminal output."""
    name_a = _player_name(tournament, match.a_id)
    name_b = _player_name(tournament, match.b_id)
    if match.is_completed:
        line = f"{match.id}  {name_a} {match.score_a}-{match.score_b} {name_b}"
        if match.proof_url:
            line += f"  [{match.proof_url}]"
        return line
    return f"{match.id}  {name_a} vs {name_b}  (à jouer)"


# ========== Commands ==========


def cmd_show(tournament: Tournament, args: argparse.Namespace) -> int:
    players = tournament.count_players()
    matches = tournament.count_matches()

    print(f"{tournament.name} - {tournament.config.mode}")
    print(f"Round actuel : {tournament.current_round()}")
    print(
        f"Joueurs : {players.total} ({players.qualified} qualifiés, "
        f"{players.eliminated} éliminés, {players.active} en attente)"
    )
    print(
        f"Matchs : {matches.total} ({matches.completed} terminés, "
        f"{matches.to_play} à jouer)"
    )

    for round_code in tournament.rounds_present():
        print()
        print(f"== {ROUND_NAMES.get(round_code, round_code)} ({round_code})")
        for match in tournament.matches_in_round(round_code):
            print(f"  {format_match(tournament, match)}")

    if args.players:
        print()
        print("== Joueurs")
        for player in tournament.players:
            print(f"  {player.id}  {player.name}  {tournament.status_label(player.status)}")

    champion = tournament.champion()
    if champion:
        print()
        print(f"Vainqueur : {champion.name}")
    return 0


def cmd_validate(tournament: Tournament, args: argparse.Namespace) -> int:
    match = tournament.validate_match(
        args.match_id, args.score_a, args.score_b, args.proof, args.actor
    )
    save_data(args.store, tournament)
    print(f"Match validé : {format_match(tournament, match)}")
    return 0


def cmd_generate(tournament: Tournament, args: argparse.Namespace) -> int:
    created = tournament.generate_next_round(args.from_round, args.to_round, args.actor)
    save_data(args.store, tournament)
    print(f"Round {args.to_round} généré ({len(created)} matchs)")
    for match in created:
        print(f"  {format_match(tournament, match)}")
    return 0


def cmd_next(tournament: Tournament, args: argparse.Namespace) -> int:
    advance = tournament.generate_next_round_from_current(args.actor)
    if not advance.tournament_complete:
        save_data(args.store, tournament)
    print(advance.message)
    for match in advance.created:
        print(f"  {format_match(tournament, match)}")
    return 0


def cmd_history(tournament: Tournament, args: argparse.Namespace) -> int:
    entries = tournament.history[: args.limit] if args.limit else tournament.history
    if not entries:
        print("Aucun historique.")
    for entry in entries:
        print(f"{entry.ts}  [{entry.type}]  {entry.actor} : {entry.message}")
    return 0


# ========== Parser ==========


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="bracketengine",
        description="Manage a single-elimination tournament bracket",
    )
    parser.add_argument(
        "--data-file",
        default=os.environ.get(ENV_DATA_FILE, DEFAULT_DATA_FILE),
        help=f"Local tournament file (default: {DEFAULT_DATA_FILE}, env {ENV_DATA_FILE})",
    )
    parser.add_argument(
        "--remote-url",
        default=os.environ.get(ENV_REMOTE_URL, DEFAULT_REMOTE_URL),
        help=f"Snapshot fetched when there is no local file (env {ENV_REMOTE_URL})",
    )
    parser.add_argument(
        "--actor",
        default=DEFAULT_ACTOR,
        help=f"Label recorded in the history (default: {DEFAULT_ACTOR})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Show the bracket")
    show.add_argument("--players", action="store_true", help="Also list players")
    show.set_defaults(handler=cmd_show)

    validate = subparsers.add_parser("validate", help="Record a match result")
    validate.add_argument("match_id")
    validate.add_argument("score_a")
    validate.add_argument("score_b")
    validate.add_argument("--proof", default="", help="Direct image link (.png/.jpg/.webp)")
    validate.set_defaults(handler=cmd_validate)

    generate = subparsers.add_parser(
        "generate", help="Generate a round from a completed one"
    )
    generate.add_argument("from_round", choices=ROUND_ORDER)
    generate.add_argument("to_round", choices=ROUND_ORDER)
    generate.set_defaults(handler=cmd_generate)

    nxt = subparsers.add_parser("next", help="Generate the round after the current one")
    nxt.set_defaults(handler=cmd_next)

    history = subparsers.add_parser("history", help="Show the audit log, newest first")
    history.add_argument("--limit",
        type=non_negative_int,
        default=0,
        help="Show at most N entries (0 shows all)",
    )
    history.set_defaults(handler=cmd_history)

    subparsers.add_parser("reset", help="Delete the local copy")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("bracketengine").setLevel(logging.DEBUG)

    args.store = JsonFileStore(args.data_file)

    try:
        if args.command == "reset":
            reset_data(args.store)
            print(f"Données locales supprimées ({args.data_file})")
            return 0

        tournament = load_data(args.store, RemoteSource(args.remote_url))
        return args.handler(tournament, args)
    except BracketEngineException as e:
        print(f"Erreur : {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
