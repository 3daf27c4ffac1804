"""Answering a suggestion and settling an accusation."""

from __future__ import annotations

import random
from dataclasses import dataclass

from knightclue.game import Game
from knightclue.rules import check_accusation


@dataclass(frozen=True)
class Refutation:
    """A card shown by another player to disprove a suggestion."""

    player_index: int
    player_name: str
    card: str


def _card_to_show(
    room: str,
    enemy: str,
    weapon: str,
    has_room: bool,
    has_enemy: bool,
    has_weapon: bool,
    rng: random.Random | None,
) -> str:
    """Pick which matching card is shown when a player holds one or more."""
    if has_room and has_enemy and has_weapon:
        chooser = rng if rng is not None else random
        return chooser.choice((weapon, room))
    if has_weapon:
        return weapon
    if has_room:
        return room
    return enemy


def find_refutation(
    game: Game,
    player_index: int,
    room: str,
    enemy: str,
    weapon: str,
    rng: random.Random | None = None,
) -> Refutation | None:
    """Ask the other players in turn order to disprove a suggestion.

    The first player after the one suggesting who holds any of the three
    cards shows one of them. When nobody can, None is returned: the
    suggestion stands.
    """
    count = game.player_count
    if not 0 <= player_index < count:
        raise IndexError(f"no player {player_index} in this game")
    for offset in range(1, count):
        index = (player_index + offset) % count
        player = game.players[index]
        has_room = player.has_card(room)
        has_enemy = player.has_card(enemy)
        has_weapon = player.has_card(weapon)
        if has_room or has_enemy or has_weapon:
            card = _card_to_show(
                room, enemy, weapon, has_room, has_enemy, has_weapon, rng
            )
            return Refutation(index, player.name, card)
    return None


def resolve_accusation(game: Game, weapon: str, room: str, enemy: str) -> bool:
    """Settle the current player's accusation.

    A correct accusation wins the game for that player and puts everyone
    else out; a wrong one puts the accuser out. Returns whether it was right.
    """
    if check_accusation(game, weapon, room, enemy):
        game.end_with_winner(game.turn)
        return True
    game.current_player().alive = False
    return False