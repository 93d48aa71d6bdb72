"""Adapters for the Steam storefront."""

from deckcache.adapters.steam.compatibility import SteamCompatibilityAdapter
from deckcache.adapters.steam.store import SteamAppDetailsAdapter, SteamSuggestionsAdapter
from deckcache.adapters.steam.strings import STEAM_DECK_STRINGS

__all__ = [
    "STEAM_DECK_STRINGS",
    "SteamAppDetailsAdapter",
    "SteamCompatibilityAdapter",
    "SteamSuggestionsAdapter",
]
