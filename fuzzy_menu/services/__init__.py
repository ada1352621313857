"""Services for Fuzzy Menu."""

from fuzzy_menu.services.fuzzy import ScoreConfig, match
from fuzzy_menu.services.search import SearchEngine
from fuzzy_menu.services.input_loader import StreamInputLoader
from fuzzy_menu.services.output_writer import StandardOutputWriter
from fuzzy_menu.services.config import MenuConfig

__all__ = [
    "ScoreConfig",
    "match",
    "SearchEngine",
    "StreamInputLoader",
    "StandardOutputWriter",
    "MenuConfig",
]
