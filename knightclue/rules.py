"""Rules of a turn: rooms on the board, choices by number, accusations, teleports."""

from __future__ import annotations

import random

from knightclue.game import Game
from knightclue.player import Player

ACCUSATION_TILE = "5"
STAG_TILE = "c"

ROOMS_BY_TILE: dict[str, str] = {
    "1": "Falaises Hurlantes",
    "2": "Dirtmouth",
    "3": "Mont Cristal",
    "4": "Vertchemin",
    "6": "Jardins de la Reine",
    "7": "Frontieres du Royaume",
    "8": "Nid-profond",
    "9": "Bassin Ancestral",
    "a": "La Ruche",
}

ENEMY_CHOICES: dict[int, str] = {
    1: "Knight",
    2: "Zote",
    3: "Tiso",
    4: "Hornet",
    5: "Quirrel",
    6: "Cloth",
}

WEAPON_CHOICES: dict[int, str] = {
    1: "Aiguillon",
    2: "Lance",
    3: "Griffe",
    4: "Aiguille",
    5: "Faux",
    6: "Massue",
}

ROOM_CHOICES: dict[int, str] = {
    1: "Falaises Hurlantes",
    2: "Dirtmouth",
    3: "Mont Cristal",
    4: "Vertchemin",
    5: "Jardins de la Reine",
    6: "Nid-profond",
    7: "Bassin Ancestral",
    8: "La Ruche",
    9: "Frontieres du Royaume",
}

# Stag stations a player can be sent to: left, right and top of the board.
TELEPORT_DESTINATIONS: tuple[tuple[int, int], ...] = ((1, 11), (25, 12), (19, 2))


def room_at_tile(tile: str) -> str:
    """Name of the room a tile belongs to, or an empty string outside any room."""
    return ROOMS_BY_TILE.get(tile, "")


def can_suggest(tile: str) -> bool:
    """True on a room tile, where a suggestion may be made (not the centre)."""
    return tile in ROOMS_BY_TILE


def can_accuse(tile: str) -> bool:
    """True on the central tile, where an accusation may be made."""
    return tile == ACCUSATION_TILE


def enemy_choice(number: int) -> str:
    """Enemy picked by a numbered button, or an empty string when none is picked."""
    return ENEMY_CHOICES.get(number, "")


def weapon_choice(number: int) -> str:
    """Weapon picked by a numbered button, or an empty string when none is picked."""
    return WEAPON_CHOICES.get(number, "")


def room_choice(number: int) -> str:
    """Room picked by a numbered button, or an empty string when none is picked."""
    return ROOM_CHOICES.get(number, "")


def check_accusation(game: Game, weapon: str, room: str, enemy: str) -> bool:
    """True when the accusation names exactly what is in the envelope."""
    return game.envelope.matches(weapon, room, enemy)


def teleport(player: Player, rng: random.Random | None = None) -> tuple[int, int]:
    """Send the player to a random stag station and return the new position."""
    chooser = rng if rng is not None else random
    player.x, player.y = chooser.choice(TELEPORT_DESTINATIONS)
    return player.x, player.y