from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from xtream.services.mappers.common import as_mapping, category_ids, minutes_to_seconds, omit, require
from xtream.utils.fields import first_present, split_list, to_date, to_epoch_date, to_number, to_str_id
from xtream.utils.keys import normalize_keys

_SHOW_CONSUMED = (
    "num",
    "streamType",
    "rating",
    "rating5Based",
    "seriesId",
    "cover",
    "categoryId",
    "categoryIds",
    "backdropPath",
    "releaseDate",
    "releasedate",
    "episodeRunTime",
    "lastModified",
    "cast",
    "director",
    "genre",
    "youtubeTrailer",
)

_SEASON_CONSUMED = (
    "id",
    "seasonNumber",
    "cover",
    "coverBig",
    "coverTmdb",
    "airDate",
    "releaseDate",
    "episodeCount",
    "voteAverage",
)

_EPISODE_CONSUMED = ("id", "season", "episodeNum", "added", "info")

_EPISODE_INFO_CONSUMED = (
    "releaseDate",
    "airDate",
    "rating",
    "movieImage",
    "coverBig",
    "durationSecs",
    "duration",
    "tmdbId",
    "season",
)


@dataclass
class ShowGraph:
    """A show detail broken into its records; every season and episode points back by id."""

    show: dict[str, Any]
    seasons: list[dict[str, Any]] = field(default_factory=list)
    episodes: list[dict[str, Any]] = field(default_factory=list)

    def episodes_of(self, season_id: str) -> list[dict[str, Any]]:
        return [episode for episode in self.episodes if episode["seasonId"] == season_id]


def _show_fields(raw: Mapping[str, Any], data: Mapping[str, Any], show_id: str) -> dict[str, Any]:
    backdrops = data.get("backdropPath") or []
    if isinstance(backdrops, str):
        backdrops = [backdrops]

    return {
        "id": show_id,
        **omit(data, _SHOW_CONSUMED),
        "cast": split_list(data.get("cast")),
        "director": split_list(data.get("director")),
        "genre": split_list(data.get("genre")),
        "voteAverage": to_number(data.get("rating")),
        "poster": data.get("cover"),
        "cover": backdrops[0] if backdrops else None,
        "duration": minutes_to_seconds(data.get("episodeRunTime")),
        "youtubeId": data.get("youtubeTrailer") or None,
        # the same date turns up as releaseDate, release_date or releasedate depending on the panel
        "releaseDate": to_date(first_present(raw, "releaseDate", "release_date", "releasedate")),
        "updatedAt": to_epoch_date(data.get("lastModified")),
        "categoryIds": category_ids(data),
    }


def map_show_listing(show: dict[str, Any]) -> dict[str, Any]:
    """Normalize one entry of get_series."""
    data = normalize_keys(show)
    return _show_fields(show, data, to_str_id(require(data, "seriesId", "show")))


def _is_index_key(key: str) -> bool:
    return key.isdigit() and (key == "0" or not key.startswith("0"))


def ordered_season_keys(groups: Mapping[str, Any]) -> list[str]:
    """Integer-like keys ascending, then any other key in the order it was met."""
    keys = list(groups)
    numeric = sorted((key for key in keys if _is_index_key(key)), key=int)
    return numeric + [key for key in keys if not _is_index_key(key)]


def group_episodes(raw_episodes: Any) -> dict[str, list[dict[str, Any]]]:
    """
    Episodes keyed by season number.

    Most panels send a mapping of season number to episode list; some send a plain list
    (or a list of lists), which is grouped by each episode's own season field.
    """
    if isinstance(raw_episodes, Mapping):
        return {str(key): list(value or []) for key, value in raw_episodes.items()}

    groups: dict[str, list[dict[str, Any]]] = {}
    for item in raw_episodes or []:
        batch = item if isinstance(item, list) else [item]
        for episode in batch:
            groups.setdefault(str(episode.get("season")), []).append(episode)
    return groups


def synthesize_seasons(groups: Mapping[str, list[dict[str, Any]]]) -> list[dict[str, Any]]:
    """
    Build season records for a show whose provider sent episodes but no seasons.

    One season per season key, numbered and identified by that key, borrowing its cover,
    air date and rating from the first episode listed under it.
    """
    seasons = []
    for key in ordered_season_keys(groups):
        episodes = groups[key]
        if not episodes:
            continue

        first_info = normalize_keys(as_mapping(episodes[0].get("info")), deep=True)
        number = to_number(key)
        seasons.append(
            {
                "id": number if number is not None else key,
                "name": f"Season {key}",
                "episodeCount": len(episodes),
                "overview": "",
                "airDate": first_present(first_info, "releaseDate", "airDate"),
                "cover": first_info.get("movieImage"),
                "coverBig": first_info.get("movieImage"),
                "seasonNumber": number,
                "voteAverage": to_number(first_info.get("rating")),
            }
        )
    return seasons


def map_season(season: Mapping[str, Any], show_id: str) -> dict[str, Any]:
    season_id = season.get("id")
    if season_id is None:
        season_id = require(season, "seasonNumber", "season")

    return {
        "id": to_str_id(season_id),
        **omit(season, _SEASON_CONSUMED),
        "number": to_number(season.get("seasonNumber")),
        "episodeCount": to_number(season.get("episodeCount")),
        "voteAverage": to_number(season.get("voteAverage")),
        "cover": first_present(season, "coverBig", "coverTmdb", "cover"),
        "releaseDate": to_date(first_present(season, "airDate", "releaseDate")),
        "showId": show_id,
    }


def map_episode(episode: Mapping[str, Any], show_id: str, season_id: str) -> dict[str, Any]:
    data = normalize_keys(episode, deep=True)
    info = as_mapping(data.get("info"))

    season_number = first_present(data, "season")
    if season_number is None:
        season_number = info.get("season")

    return {
        "id": to_str_id(require(data, "id", "episode")),
        "number": to_number(data.get("episodeNum")),
        **omit(data, _EPISODE_CONSUMED),
        **omit(info, _EPISODE_INFO_CONSUMED),
        "seasonNumber": to_number(season_number),
        "tmdbId": to_str_id(info.get("tmdbId")),
        "poster": info.get("movieImage"),
        "cover": info.get("coverBig"),
        "voteAverage": to_number(info.get("rating")),
        "duration": to_number(info.get("durationSecs")),
        "durationFormatted": info.get("duration"),
        "releaseDate": to_date(first_present(info, "releaseDate", "airDate")),
        "createdAt": to_epoch_date(data.get("added")),
        "showId": show_id,
        "seasonId": season_id,
    }


def map_show(show: dict[str, Any]) -> ShowGraph:
    """
    Normalize the get_series_info payload into a show with its seasons and episodes.

    Episodes are flattened out of the per-season map in season key order. Each episode
    resolves its season id through the season whose number matches its own, falling back
    to its raw season number. When the provider sends no seasons they are synthesized
    from the episode map, and an episode whose own season number matches none of them
    belongs to the season of the key it is listed under.
    """
    raw_info = as_mapping(show.get("info"))
    info = normalize_keys(raw_info)
    show_id = to_str_id(require(info, "seriesId", "show"))

    groups = group_episodes(show.get("episodes"))
    raw_seasons = [normalize_keys(season, deep=True) for season in show.get("seasons") or []]

    synthesized = not raw_seasons and bool(groups)
    if synthesized:
        raw_seasons = synthesize_seasons(groups)
        logger.debug(f"Show {show_id} has no seasons, synthesized {len(raw_seasons)} from episodes")

    seasons = [map_season(season, show_id) for season in raw_seasons]

    season_ids: dict[Any, str] = {}
    for season in seasons:
        if season["number"] is not None:
            season_ids.setdefault(season["number"], season["id"])

    episodes = []
    for key in ordered_season_keys(groups):
        for episode in groups[key]:
            raw_number = episode.get("season")
            if raw_number is None or raw_number == "":
                raw_number = key
            season_id = season_ids.get(to_number(raw_number))
            if season_id is None:
                # synthesized seasons only exist per group key
                fallback = key if synthesized else raw_number
                season_id = season_ids.get(to_number(fallback)) or to_str_id(fallback)
            episodes.append(map_episode(episode, show_id, season_id))

    return ShowGraph(show=_show_fields(raw_info, info, show_id), seasons=seasons, episodes=episodes)
