"""Combatants of the text adventure: the player and the monsters."""

from __future__ import annotations

from enum import IntEnum

MAX_NAME_LENGTH = 127
"""Longest name an entity may carry."""


class Job(IntEnum):
    """Classes the player can advance to."""

    WARRIOR = 1
    WIZARD = 2
    THIEF = 3


class Difficulty(IntEnum):
    """Monster difficulty levels."""

    EASY = 1
    MEDIUM = 2
    HARD = 3


_JOB_STATS = {
    Job.WARRIOR: ("Warrior", 100, 10),
    Job.WIZARD: ("Wizard", 100, 10),
    Job.THIEF: ("Thief", 100, 10),
}

_DIFFICULTY_STATS = {
    Difficulty.EASY: ("Easy", 30, 3),
    Difficulty.MEDIUM: ("Medium", 60, 6),
    Difficulty.HARD: ("Hard", 90, 9),
}


class Entity:
    """Anything with a name, hit points and an attack value."""

    def __init__(self, name: str = "", max_hp: int = 0, atk: int = 0) -> None:
        self.initialize(name, max_hp, atk)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, hp={self.hp}/"
            f"{self.max_hp}, atk={self.atk})"
        )

    def initialize(self, name: str, max_hp: int, atk: int) -> None:
        """Reset name and stats; hit points start full."""
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(f"name longer than {MAX_NAME_LENGTH} characters")
        self.name = name
        self.max_hp = max_hp
        self.hp = max_hp
        self.atk = atk

    def is_dead(self) -> bool:
        """True when hit points have dropped to zero or below."""
        return self.hp <= 0

    def resurrect(self) -> None:
        """Restore full hit points, but only if dead."""
        if self.is_dead():
            self.hp = self.max_hp

    def attack(self, target: "Entity") -> None:
        """Take this entity's attack value off ``target``'s hit points."""
        target.hp -= self.atk


class Player(Entity):
    """The player character."""

    def advance_job(self, job: int) -> bool:
        """Become ``job``; unknown jobs are ignored. Returns whether it applied."""
        try:
            stats = _JOB_STATS[Job(job)]
        except ValueError:
            return False
        self.initialize(*stats)
        return True


class Monster(Entity):
    """An opponent whose stats come from a difficulty level."""

    def set_difficulty(self, difficulty: int) -> bool:
        """Take the stats of ``difficulty``; unknown levels are ignored."""
        try:
            stats = _DIFFICULTY_STATS[Difficulty(difficulty)]
        except ValueError:
            return False
        self.initialize(*stats)
        return True