"""Battle simulation, player statistics and username checks for a base attack and defence game."""

__version__ = "0.1.0"
__all__ = ["constants", "errors", "models", "players", "simulation"]