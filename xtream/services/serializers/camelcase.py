from functools import partial

from xtream.services.serializers.base import define_serializers
from xtream.utils.keys import normalize_keys

deep = partial(normalize_keys, deep=True)

camel_case_serializer = define_serializers(
    "Camel Case",
    profile=normalize_keys,
    server_info=normalize_keys,
    channel_categories=normalize_keys,
    movie_categories=normalize_keys,
    show_categories=normalize_keys,
    channels=normalize_keys,
    movies=normalize_keys,
    movie=deep,
    shows=normalize_keys,
    show=deep,
    short_epg=deep,
    full_epg=deep,
)
