"""Game state, screen layouts, input handling and score files for a two-level runner."""

__version__ = "1.0.0"