"""Game model for a tile-based, turn-based strategy game: identifiers, vectors, tiles, units, players, a technology tree and random maps."""

__version__ = "0.1.0"
__all__ = ["gamemap", "ids", "player", "techtree", "tile", "unit", "vec"]