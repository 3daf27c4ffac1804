"""State of one game: players, decks of cards, the envelope and the turn."""

from __future__ import annotations

import random
from enum import IntEnum

from knightclue.cards import Card, Envelope
from knightclue.player import Player

MAX_PLAYERS = 6
DEFAULT_PLAYER_COUNT = 3

CHARACTERS: tuple[str, ...] = ("quirrel", "knight", "zote", "tiso", "hornet", "cloth")

ENEMIES: tuple[str, ...] = ("Hornet", "Knight", "Tiso", "Cloth", "Zote", "Quirrel")

ZONES: tuple[str, ...] = (
    "Falaises Hurlantes",
    "Dirtmouth",
    "Mont Cristal",
    "Vertchemin",
    "Jardins de la Reine",
    "Nid-profond",
    "Bassin Ancestral",
    "La Ruche",
    "Frontieres du Royaume",
)

WEAPONS: tuple[str, ...] = ("Aiguillon", "Lance", "Griffe", "Aiguille", "Faux", "Massue")


class GameState(IntEnum):
    """How far a game has gone."""

    PLAYING = 0
    SAVED = 1
    WON = 2


class Game:
    """Everything that changes during a game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.characters: list[str] = list(CHARACTERS)
        self.state = GameState.PLAYING
        self.player_count = DEFAULT_PLAYER_COUNT
        self.computer_count = 0
        self._turn = 0
        self.anim_counter = 0.0
        self.players: list[Player] = [
            Player(name=f"joueur{number}", character="vide")
            for number in range(1, MAX_PLAYERS + 1)
        ]
        self.enemies: list[Card] = [Card(name) for name in ENEMIES]
        self.zones: list[Card] = [Card(name) for name in ZONES]
        self.weapons: list[Card] = [Card(name) for name in WEAPONS]
        self.envelope = Envelope()
        self.draw_pile: list[Card] = []

    @property
    def turn(self) -> int:
        """Index of the player whose turn it is."""
        return self._turn

    @turn.setter
    def turn(self, value: int) -> None:
        self._turn = value % self.player_count

    def create_envelope(self) -> None:
        """Draw one weapon, one enemy and one zone at random into the envelope."""
        if not (self.weapons and self.enemies and self.zones):
            raise ValueError("cannot fill the envelope: a deck is empty")
        weapon = self.rng.randrange(len(self.weapons))
        enemy = self.rng.randrange(len(self.enemies))
        zone = self.rng.randrange(len(self.zones))
        self.envelope = Envelope(
            room=self.zones.pop(zone),
            enemy=self.enemies.pop(enemy),
            weapon=self.weapons.pop(weapon),
        )

    def load_envelope(self, weapon: str, enemy: str, room: str) -> None:
        """Put a known solution in the envelope, as when a saved game is resumed."""
        self.envelope = Envelope(room=Card(room), enemy=Card(enemy), weapon=Card(weapon))

    def fill_draw_pile(self) -> None:
        """Move the remaining weapons, zones and enemies, in that order, to the draw pile."""
        self.draw_pile.extend(self.weapons)
        self.draw_pile.extend(self.zones)
        self.draw_pile.extend(self.enemies)
        self.weapons.clear()
        self.enemies.clear()
        self.zones.clear()

    def remove_from_pile(self, index: int) -> Card:
        """Take the card at a position out of the draw pile and return it."""
        return self.draw_pile.pop(index)

    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self._turn]

    def deck_listing(self) -> str:
        """Text listing of every deck, the draw pile and the envelope."""
        sections = (
            ("armes", self.weapons),
            ("ennemis", self.enemies),
            ("endroits", self.zones),
            ("pioche", self.draw_pile),
        )
        lines: list[str] = []
        for title, cards in sections:
            lines.append(f"{title}:")
            lines.extend(f"\t{card.name}" for card in cards)
        lines.append("enveloppe:")
        lines.append(f"\t{self.envelope.weapon.name}")
        lines.append(f"\t{self.envelope.enemy.name}")
        lines.append(f"\t{self.envelope.room.name}")
        return "\n".join(lines)

    def end_with_winner(self, index: int) -> None:
        """End the game: the player at index wins, the other players are out."""
        if not 0 <= index < self.player_count:
            raise IndexError(f"no player {index} in this game")
        self.state = GameState.WON
        for number, player in enumerate(self.players[: self.player_count]):
            if number != index:
                player.alive = False