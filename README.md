# knightclue

Game logic for a deduction board game in the style of a murder-mystery
card game. A secret envelope holds one enemy, one weapon and one zone.
Players move on a tile map and make suggestions, which other players
refute by showing a card. They try to make a correct accusation.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `knightclue.cards`

- `Card(name)` is a frozen dataclass. `str(card)` is its name.
- `Envelope(room, enemy, weapon)` holds the hidden solution.
  `Envelope.matches(weapon, room, enemy)` is true only when all three
  names equal the hidden ones.

### `knightclue.player`

`Player` is a dataclass. Its fields are:

- `name`, `character` (default `"vide"`), `alive` and `computer`
- `score`, `level`, `games_played`, `defeats` and `victories`
- the position `x`, `y` (default 8, 1), `start_x`, `start_y`
- `moves`
- the hand `cards`

Its methods are:

- `add_card(card)`
- `has_card(name)`
- `card_names()`, which returns the names in dealing order

`len(player)` is the number of cards in hand.

### `knightclue.board`

`BoardMap` is a 27 x 27 grid of single-character tile codes.

- `BoardMap.from_text(text)` builds one from text. Extra lines and
  characters are ignored. Short rows, or too few of them, raise
  `ValueError`.
- `BoardMap.load(path)` reads a file. The default path is
  `RESSOURCES/MAP/plateau.txt`.
- `tile(x, y)` returns the code at column `x`, row `y`. It raises
  `IndexError` outside the grid.
- `render()` returns the grid as text.

### `knightclue.name_input`

`edit_name(name, key)` applies one key press to a name and returns the
new name:

- `BACKSPACE` (`"\b"`) removes the last character.
- An ASCII letter or digit is appended while the name is shorter than
  `MAX_NAME_LENGTH` (10).
- Anything else, or `None`, leaves the name as it is.

### `knightclue.assets`

Resource names and paths under `RESSOURCES/`:

- `frame_count(name)` gives the number of animation frames of a
  character.
- `frame_index(name, counter)` wraps an animation counter onto a frame
  number.
- `frame_paths(name, root)` lists the animation frame files.
- `color(name)` gives an RGB triple for `"white"`, `"black"` or
  `"magic pink"`.
- `music_path(name, root)` and `font_path(name, root)` give resource
  file paths.
- `clamp_volume(volume)` keeps a volume within 0..255.

An unknown name raises `AssetNotFoundError`, which is a subclass of
`KeyError`.

### `knightclue.game`

`Game(rng)` holds the state of one game:

- six `players` (`joueur1` to `joueur6`), of whom `player_count`
  (default 3) take part
- the `enemies`, `zones` and `weapons` decks
- the `envelope` and the `draw_pile`
- `state`, a `GameState`: `PLAYING`, `SAVED` or `WON`

Its methods are:

- `create_envelope()` moves one random card of each deck into the
  envelope.
- `load_envelope(weapon, enemy, room)` puts a known solution in the
  envelope.
- `fill_draw_pile()` moves the remaining weapons, zones and enemies, in
  that order, to the draw pile.
- `remove_from_pile(index)` takes a card out of the draw pile and
  returns it.
- `current_player()` returns the player whose turn it is.
- `deck_listing()` returns a text listing of the decks, the draw pile
  and the envelope.
- `end_with_winner(index)` sets the state to `WON` and puts every other
  playing player out.

Setting `turn` wraps the value modulo `player_count`.

### `knightclue.rules`

Tile meanings:

- `room_at_tile(tile)` gives the room a tile belongs to, or `""`.
- `can_suggest(tile)` is true on a room tile.
- `can_accuse(tile)` is true on the central tile `"5"`.

Numbered choices:

- `enemy_choice(number)`, `weapon_choice(number)` and
  `room_choice(number)` map button numbers to card names. Any other
  number gives `""`.

Other rules:

- `check_accusation(game, weapon, room, enemy)` compares an accusation
  with the envelope.
- `teleport(player, rng)` moves a player to a random stag station and
  returns the new position.

### `knightclue.refutation`

`find_refutation(game, player_index, room, enemy, weapon, rng)` asks the
other players in turn order. The first one holding any of the three
cards returns a `Refutation(player_index, player_name, card)`. When
nobody holds any of them, it returns `None`.

When that player holds:

- one or two of the cards: the weapon is shown first, then the room,
  then the enemy.
- all three: the weapon or the room, chosen at random.

`resolve_accusation(game, weapon, room, enemy)` settles an accusation by
the current player:

- If it is right, that player wins and the others are out.
- If it is wrong, the accuser is out.

It returns whether the accusation was right.

## Example

```python
import random

from knightclue.game import Game
from knightclue.refutation import find_refutation, resolve_accusation

game = Game(random.Random(7))
game.create_envelope()
game.fill_draw_pile()

for position, card in enumerate(game.draw_pile):
    game.players[position % game.player_count].add_card(card)

print(find_refutation(game, 0, "Dirtmouth", "Zote", "Lance"))
print(resolve_accusation(game, "Lance", "Dirtmouth", "Zote"))
```

## What the package does not do

The package holds rules and state only:

- It draws nothing on screen, plays no sound and loads no images or
  fonts. `knightclue.assets` only names their files.
- It reads no keyboard or mouse. The caller passes key presses and
  choices in.
- It has no command to start a game.
- It does not save or load games to storage. `load_envelope` only takes
  a solution the caller already has.