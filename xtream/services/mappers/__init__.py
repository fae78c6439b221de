"""
Entity mappers.

One pure function per provider entity. Each takes the decoded provider payload and returns
a camel-cased record with every coercion applied; the serializer sets decide how those
records are shaped on the way out.
"""

from xtream.services.mappers.account import map_profile, map_server_info
from xtream.services.mappers.category import map_category
from xtream.services.mappers.channel import map_channel
from xtream.services.mappers.epg import epg_listings, map_full_epg_listing, map_short_epg_listing
from xtream.services.mappers.movie import map_movie, map_movie_listing
from xtream.services.mappers.show import ShowGraph, map_show, map_show_listing

__all__ = [
    "ShowGraph",
    "epg_listings",
    "map_category",
    "map_channel",
    "map_full_epg_listing",
    "map_movie",
    "map_movie_listing",
    "map_profile",
    "map_server_info",
    "map_short_epg_listing",
    "map_show",
    "map_show_listing",
]
