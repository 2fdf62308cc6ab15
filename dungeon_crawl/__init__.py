"""A turn-based text-board dungeon crawler with items, enemies, repairs and save games."""

__version__ = "0.1.0"