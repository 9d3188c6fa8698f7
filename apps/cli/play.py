# apps/cli/play.py
"""
CLI entry point for playing Wordle in the terminal.

This script:
  1) Validates the word lists and logs a one-line summary (counts + SHA,
     targets ⊆ valid words).
  2) Loads and shuffles the target words, builds the guess dictionary
     (valid words plus every target word).
  3) Reads one message per line from stdin and prints the reply, the same way
     a chat front-end would route messages for a single player.

Commands: /help, /new (or /start), /score, /quit. Anything else is a guess;
if no game is in progress a new one is started first.

Usage:
    python -m apps.cli.play --target-words target_words.txt --valid-words valid_words.txt
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from packages.datasets import pretty_summary, read_words, split_words, validate_wordlists
from packages.engine import MAX_TURNS, Board, Mark, WordleError
from packages.session import App, Move

log = logging.getLogger("apps.cli.play")

DEFAULT_GAME_NAME = "Bad Wordle"


def render_letter(mark: Mark, char: str) -> str:
    if mark is Mark.CORRECT:
        return f"[{char}]"
    if mark is Mark.PRESENT:
        return f"({char})"
    return f" {char.lower()} "


def render_board(board: Board) -> str:
    """
    Text rendering of every attempt, one row per attempt:
      [A] correct  (A) present   a  absent
    """
    rows = ["Your attempts:", ""]
    for attempt in board.attempts:
        rows.append("".join(render_letter(l.mark, l.char) for l in attempt))
    return "\n".join(rows)


def help_text(app: App) -> str:
    return (
        f"Welcome to {app.game_name}! The goal of the game is to guess the target "
        f"word within {MAX_TURNS} tries.\n\n"
        "Type /new to restart the game or /score to see your score"
    )


def new_game_reply(app: App, player_id: str) -> str:
    first = app.score(player_id).games == 0
    target = app.start_game(player_id)
    intro = "This is your first game." if first else f"Your score: {app.score(player_id)}."
    return (
        f"Hi {player_id}, Welcome to {app.game_name}!\n\n"
        f"{intro}\nGuess the {len(target)}-letter word."
    )


def handle_command(app: App, player_id: str, command: str) -> str:
    if command == "/help":
        return help_text(app)
    if command in ("/new", "/start"):
        return new_game_reply(app, player_id)
    if command == "/score":
        if app.score(player_id).games == 0:
            return "You have not played any games yet."
        return f"Your score: {app.score(player_id)}"
    return "I don't know that command."


def handle_message(app: App, player_id: str, text: str) -> str:
    """
    Route one incoming message for `player_id` and return the reply text.
    """
    text = text.strip()
    if text.startswith("/"):
        return handle_command(app, player_id, text)

    # No active game: this message starts one rather than counting as a guess.
    if not app.is_playing(player_id):
        return new_game_reply(app, player_id)

    try:
        move = app.play_turn(player_id, text)
    except WordleError as e:
        log.warning("%s: rejected %r: %s", player_id, text, e)
        return f"Sorry {player_id}, {e}. Type /new to start a new game."

    session = app.session(player_id)
    target = session.wordle.target_word

    if move is Move.INVALID_WORD:
        return f"Sorry {player_id}, that's not a valid word. Try again."
    if move is Move.INVALID_LENGTH:
        return f"Sorry {player_id}, the word must be {len(target)} letters long. Try again."

    board = session.wordle.board()
    reply = render_board(board)
    if move is Move.VALID:
        letters = " ".join(board.attempted_letters())
        reply += f"\n\nNice try. Guess another word?\nAttempts: {letters}"
    elif move is Move.WON:
        reply += f"\n\nYou won!\nYour score: {app.score(player_id)}"
    elif move is Move.LOST:
        reply += f"\n\nYou lost! Target word: {target}\nYour score: {app.score(player_id)}"
    return reply


def build_app(args: argparse.Namespace) -> App:
    """
    Load word lists per CLI args. Raises ValueError when there are no targets.
    """
    rep = validate_wordlists(args.target_words, args.valid_words)
    log.info(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)

    raw_targets = read_words(args.target_words) if Path(args.target_words).exists() else []
    target_words, skipped = split_words(raw_targets)
    if skipped:
        log.warning("Skipping %d unplayable target word(s).", skipped)
    if not target_words:
        raise ValueError("No target words found.")

    random.Random(args.seed).shuffle(target_words)

    valid_words = set(read_words(args.valid_words)) if Path(args.valid_words).exists() else set()
    valid_words.update(w.lower() for w in target_words)
    if not valid_words:
        log.warning("No valid words found. Not validating words.")

    return App(args.game_name, target_words, valid_words, seed=args.seed)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play Wordle in the terminal")
    ap.add_argument("-n", "--game-name", default=DEFAULT_GAME_NAME,
                    help="how the game presents itself in the welcome message")
    ap.add_argument("-t", "--target-words", default="target_words.txt",
                    help="file containing target words, one per line")
    ap.add_argument("-v", "--valid-words", default="valid_words.txt",
                    help="file containing valid guess words, one per line")
    ap.add_argument("--player", default="player", help="player name shown in replies")
    ap.add_argument("--seed", type=int, help="RNG seed (target order and random picks)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity (stderr)")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        app = build_app(args)
    except ValueError as e:
        log.error("%s", e)
        return 1

    print(help_text(app))
    for line in sys.stdin:
        text = line.strip()
        if not text:
            continue
        if text == "/quit":
            break
        print(handle_message(app, args.player, text))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
