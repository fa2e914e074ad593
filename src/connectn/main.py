from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path

from connectn.ai.selector import MoveSelector
from connectn.config import DEFAULT_CONFIG, MINIMAX_DEPTH, RESULTS_DIR, EngineConfig
from connectn.game.codec import (
    decode_session_or_new,
    encode_session,
    new_session,
    parse_difficulty,
    session_to_dict,
)
from connectn.game.controller import play_computer_move, play_human_move


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectn", description="Connect-N engine with a minimax opponent.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_new = sub.add_parser("new", help="Print a token for a fresh game")
    p_new.add_argument("--difficulty", type=str, default="strong", help="weak | moderate | strong")

    p_move = sub.add_parser("move", help="Play a column, let the computer reply, print the new token")
    p_move.add_argument("token", type=str, help="Session token from a previous command")
    p_move.add_argument("column", type=int, help="Column index (0-based)")
    p_move.add_argument("--seed", type=int, default=None, help="Seed for the weak/moderate tiers")

    p_league = sub.add_parser("league", help="Round-robin between the difficulty tiers")
    p_league.add_argument("--games", type=int, default=2, help="Games per pairing")
    p_league.add_argument("--depth", type=int, default=MINIMAX_DEPTH, help="Search depth for the strong tier")
    p_league.add_argument("--seed", type=int, default=1234)
    p_league.add_argument("--workers", type=int, default=None, help="Worker processes (default: run inline)")
    p_league.add_argument("--csv", action="store_true", help=f"Export standings under {RESULTS_DIR}")

    return ap


def _print_session(session) -> None:
    print(json.dumps(session_to_dict(session), indent=2))
    print(f"\ntoken: {encode_session(session)}")


def cmd_new(args: argparse.Namespace) -> int:
    _print_session(new_session(DEFAULT_CONFIG, parse_difficulty(args.difficulty)))
    return 0


def cmd_move(args: argparse.Namespace) -> int:
    config = DEFAULT_CONFIG
    session = decode_session_or_new(args.token, config)
    selector = MoveSelector(config=config, rng=random.Random(args.seed))

    session = play_human_move(session, args.column, config)
    session = play_computer_move(session, selector)
    _print_session(session)
    return 0


def cmd_league(args: argparse.Namespace) -> int:
    # pandas is only needed here
    from connectn.scripts.league import export_csv, run_league

    config = EngineConfig(depth=args.depth)
    df = run_league(games_per_pair=args.games, config=config, seed=args.seed, max_workers=args.workers)
    print(df.to_string(index=False))

    if args.csv:
        path = export_csv(df, Path(RESULTS_DIR))
        print(f"\nSaved results to: {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "new":
        return cmd_new(args)
    if args.cmd == "move":
        return cmd_move(args)
    return cmd_league(args)


if __name__ == "__main__":
    raise SystemExit(main())
