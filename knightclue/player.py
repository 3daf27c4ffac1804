"""A player of the game: identity, position on the board and hand of cards."""

from __future__ import annotations

from dataclasses import dataclass, field

from knightclue.cards import Card


@dataclass
class Player:
    """State of one player during a game."""

    name: str = ""
    character: str = "vide"
    alive: bool = True
    computer: bool = False
    score: int = 0
    level: int = 0
    games_played: int = 0
    defeats: int = 0
    victories: int = 0
    x: int = 8
    y: int = 1
    start_x: int = 0
    start_y: int = 0
    moves: int = 0
    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Put a card in the player's hand."""
        self.cards.append(card)

    def has_card(self, name: str) -> bool:
        """Return True when a card of that name is in the hand."""
        return any(card.name == name for card in self.cards)

    def card_names(self) -> list[str]:
        """Names of the cards in hand, in the order they were dealt."""
        return [card.name for card in self.cards]

    def __len__(self) -> int:
        return len(self.cards)