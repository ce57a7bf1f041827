"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum


class Move(Enum):
    """A hand: rock, paper or scissors, keyed by its initial."""

    ROCK = "r"
    PAPER = "p"
    SCISSORS = "s"


class Outcome(Enum):
    """The result of a round from the player's side."""

    WIN = 1
    LOSE = -1
    DRAW = 0


_BEATS = {Move.ROCK: Move.SCISSORS, Move.PAPER: Move.ROCK, Move.SCISSORS: Move.PAPER}

_MESSAGES = {Outcome.DRAW: "Game draw", Outcome.WIN: "You Win", Outcome.LOSE: "You Lose"}


def play(you: Move | str, computer: Move | str) -> Outcome:
    """Return the outcome for the player choosing *you* against *computer*."""
    you, computer = Move(you), Move(computer)
    if you is computer:
        return Outcome.DRAW
    return Outcome.WIN if _BEATS[you] is computer else Outcome.LOSE


def random_move(rng: random.Random | None = None) -> Move:
    """Draw a number from 1 to 100: up to 33 is rock, up to 66 paper, else scissors."""
    number = (rng or random).randint(1, 100)
    if number <= 33:
        return Move.ROCK
    if number <= 66:
        return Move.PAPER
    return Move.SCISSORS


def main(argv: list[str] | None = None) -> int:
    """Play one round; the move comes from the command line or standard input."""
    parser = argparse.ArgumentParser(prog="rock-paper-scissors", description="Play one round.")
    parser.add_argument("move", nargs="?", help="r for rock, p for paper, s for scissors")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's choice")
    args = parser.parse_args(argv)

    computer = random_move(random.Random(args.seed))
    text = args.move
    if text is None:
        text = input("Enter r for rock , p for paper and s for scissor\n")
    text = text.strip()
    try:
        you = Move(text[:1])
    except ValueError:
        print(f"invalid move: {text!r}", file=sys.stderr)
        return 2

    outcome = play(you, computer)
    print(f"You chose {you.value} and computer chose {computer.value}.")
    print(_MESSAGES[outcome])
    return 0