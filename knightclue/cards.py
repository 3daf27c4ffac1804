"""Cards and the envelope that hides the solution of a game."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Card:
    """A single card: an enemy, a weapon or a zone, known by its name."""

    name: str = ""

    def __str__(self) -> str:
        return self.name


@dataclass
class Envelope:
    """The secret triple (zone, enemy, weapon) that players try to deduce."""

    room: Card = field(default_factory=Card)
    enemy: Card = field(default_factory=Card)
    weapon: Card = field(default_factory=Card)

    def matches(self, weapon: str, room: str, enemy: str) -> bool:
        """Return True when the three names are exactly the hidden ones."""
        return (
            weapon == self.weapon.name
            and room == self.room.name
            and enemy == self.enemy.name
        )