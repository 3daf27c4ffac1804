"""Rules and state for a deduction board game.

The package covers cards, the envelope, players, the board map, name
input, asset names, turns, suggestions and accusations.
"""

__version__ = "0.1.0"