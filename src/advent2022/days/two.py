"""
Day two – Rock Paper Scissors.

Each line of the strategy guide holds the opponent's shape (A/B/C) and a
second code (X/Y/Z). Part one reads the second code as the shape to play;
part two reads it as the outcome to aim for (X lose, Y draw, Z win).

Score of a round = shape score (rock 1, paper 2, scissors 3) + outcome score
(lose 0, draw 3, win 6).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple


class Choice(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def from_code(cls, code: str) -> "Choice":
        try:
            return _CHOICE_CODES[code]
        except KeyError:
            raise ValueError(f"Unknown choice code: {code!r}") from None

    @property
    def score(self) -> int:
        return self.value

    @property
    def beats(self) -> "Choice":
        """The shape this one defeats."""
        return _BEATS[self]

    @property
    def loses_to(self) -> "Choice":
        return _LOSES_TO[self]


_CHOICE_CODES: Dict[str, Choice] = {
    "A": Choice.ROCK,
    "B": Choice.PAPER,
    "C": Choice.SCISSORS,
    "X": Choice.ROCK,
    "Y": Choice.PAPER,
    "Z": Choice.SCISSORS,
}

_BEATS: Dict[Choice, Choice] = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}

_LOSES_TO: Dict[Choice, Choice] = {loser: winner for winner, loser in _BEATS.items()}


class MatchResult(Enum):
    WIN = 6
    DRAW = 3
    LOSE = 0

    @property
    def score(self) -> int:
        return self.value


# Second column read as the desired outcome (part two).
_OUTCOME_FOR_CHOICE: Dict[Choice, MatchResult] = {
    Choice.ROCK: MatchResult.LOSE,
    Choice.PAPER: MatchResult.DRAW,
    Choice.SCISSORS: MatchResult.WIN,
}


@dataclass(frozen=True)
class Game:
    """One round: the opponent's shape and the guide's recommendation."""

    opponent: Choice
    recommended: Choice

    @classmethod
    def from_line(cls, line: str) -> "Game":
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Invalid game line: {line!r}")
        opponent, recommended = (Choice.from_code(part) for part in parts)
        return cls(opponent=opponent, recommended=recommended)

    def result(self) -> MatchResult:
        """Outcome for us when playing `recommended` against `opponent`."""
        if self.recommended is self.opponent:
            return MatchResult.DRAW
        if self.recommended.beats is self.opponent:
            return MatchResult.WIN
        return MatchResult.LOSE

    def score(self) -> int:
        return self.recommended.score + self.result().score

    def alternate_recommendation(self) -> MatchResult:
        return _OUTCOME_FOR_CHOICE[self.recommended]

    def alternate_result(self) -> Choice:
        """Shape to play so that the round ends with `alternate_recommendation`."""
        outcome = self.alternate_recommendation()
        if outcome is MatchResult.WIN:
            return self.opponent.loses_to
        if outcome is MatchResult.LOSE:
            return self.opponent.beats
        return self.opponent

    def alternate_score(self) -> int:
        return self.alternate_result().score + self.alternate_recommendation().score

    def __str__(self) -> str:
        return f"{self.recommended.name} vs {self.opponent.name} = {self.result().name}"


def parse_games(lines: Iterable[str]) -> List[Game]:
    """Parse every non-blank line into a `Game`."""
    return [Game.from_line(line) for line in lines if line.strip()]


def solve(lines: Sequence[str]) -> Tuple[int, int]:
    games = parse_games(lines)
    part_one = sum(game.score() for game in games)
    part_two = sum(game.alternate_score() for game in games)
    return part_one, part_two


__all__ = [
    "Choice",
    "MatchResult",
    "Game",
    "parse_games",
    "solve",
]
