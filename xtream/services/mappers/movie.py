from typing import Any

from xtream.services.mappers.common import as_mapping, category_ids, minutes_to_seconds, omit, require
from xtream.utils.fields import first_present, split_list, to_date, to_epoch_date, to_number, to_str_id
from xtream.utils.keys import normalize_keys

_LISTING_CONSUMED = (
    "num",
    "streamType",
    "streamIcon",
    "streamId",
    "releaseDate",
    "rating",
    "rating5Based",
    "added",
    "categoryIds",
    "categoryId",
    "episodeRunTime",
    "genre",
    "cast",
    "director",
    "youtubeTrailer",
)

_INFO_CONSUMED = (
    "director",
    "actors",
    "genre",
    "cast",
    "oName",
    "releaseDate",
    "releasedate",
    "mpaaRating",
    "age",
    "rating",
    "duration",
    "durationSecs",
    "coverBig",
    "movieImage",
    "backdropPath",
    "ratingCountKinopoisk",
    "episodeRunTime",
    "youtubeTrailer",
    "tmdbId",
    # identity and category facts always come from movie_data
    "streamId",
    "categoryId",
    "categoryIds",
    "added",
)

_DATA_CONSUMED = ("categoryId", "categoryIds", "streamId", "added")


def map_movie_listing(movie: dict[str, Any]) -> dict[str, Any]:
    """Normalize one entry of get_vod_streams. Runtime is converted from minutes to seconds."""
    data = normalize_keys(movie)

    return {
        "id": to_str_id(require(data, "streamId", "movie")),
        **omit(data, _LISTING_CONSUMED),
        "genre": split_list(data.get("genre")),
        "cast": split_list(data.get("cast")),
        "director": split_list(data.get("director")),
        "poster": data.get("streamIcon"),
        "duration": minutes_to_seconds(data.get("episodeRunTime")),
        "voteAverage": to_number(data.get("rating")),
        "releaseDate": to_date(data.get("releaseDate")),
        "youtubeId": data.get("youtubeTrailer") or None,
        "createdAt": to_epoch_date(data.get("added")),
        "categoryIds": category_ids(data),
    }


def map_movie(movie: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize the get_vod_info payload.

    The provider splits a movie into `info` (descriptive, from the metadata source) and
    `movie_data` (the stream itself). Both carry some of the same keys: movie_data wins for
    identity and categories, info wins for everything descriptive.
    """
    raw_info = as_mapping(movie.get("info"))
    info = normalize_keys(raw_info, deep=True)
    movie_data = normalize_keys(as_mapping(movie.get("movie_data")), deep=True)

    stream_id = require(movie_data, "streamId", "movie")

    duration = to_number(info.get("durationSecs"))
    if duration is None:
        duration = minutes_to_seconds(info.get("episodeRunTime"))

    record = {
        "id": to_str_id(stream_id),
        **omit(movie_data, _DATA_CONSUMED),
        **omit(info, _INFO_CONSUMED),
        "informationUrl": info.get("kinopoiskUrl"),
        "originalName": info.get("oName"),
        "cover": info.get("coverBig"),
        "poster": info.get("movieImage"),
        "duration": duration,
        "durationFormatted": info.get("duration"),
        "voteAverage": to_number(info.get("rating")),
        "director": split_list(info.get("director")),
        "actors": split_list(info.get("actors")),
        "cast": split_list(info.get("cast")),
        "genre": split_list(info.get("genre")),
        "categoryIds": category_ids(movie_data),
        "tmdbId": to_str_id(info.get("tmdbId")),
        "youtubeId": info.get("youtubeTrailer") or None,
        "releaseDate": to_date(first_present(raw_info, "releaseDate", "release_date", "releasedate")),
        "createdAt": to_epoch_date(movie_data.get("added")),
        "rating": {
            "mpaa": info.get("mpaaRating") or None,
            "age": to_number(info.get("age")),
        },
    }

    if movie.get("url") is not None:
        record["url"] = movie["url"]

    return record
