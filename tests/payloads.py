"""Provider payloads served by the mock panel."""

PROFILE = {
    "username": "testuser",
    "password": "testpass",
    "message": "Welcome to IPTV Service",
    "auth": 1,
    "status": "Active",
    "exp_date": "1767542400",
    "is_trial": "0",
    "active_cons": 0,
    "created_at": "1735084800",
    "max_connections": "5",
    "allowed_output_formats": ["m3u8", "ts", "rtmp"],
}

SERVER_INFO = {
    "xui": True,
    "version": "1.5.13",
    "revision": None,
    "url": "api.example-iptv.com",
    "port": "2052",
    "https_port": "443",
    "server_protocol": "https",
    "rtmp_port": "8880",
    "timestamp_now": 1740599153,
    "time_now": "2025-02-26 19:45:53",
    "timezone": "UTC",
}


def _channel(num, name, icon, category):
    return {
        "num": num,
        "name": name,
        "stream_type": "live",
        "stream_id": num,
        "stream_icon": f"https://example-iptv.com/images/{icon}.png",
        "epg_channel_id": f"C679.{261 + num}.ersatztv.org",
        "added": "1735884153",
        "custom_sid": "",
        "tv_archive": 0,
        "direct_source": "",
        "tv_archive_duration": 0,
        "category_id": str(category),
        "category_ids": [category],
        "thumbnail": "",
    }


CHANNELS = [
    _channel(1, "News 24/7", "news24", 1),
    _channel(2, "Sports HD", "sports-hd", 1),
    _channel(3, "Entertainment", "entertainment", 1),
    _channel(4, "Documentaries", "documentaries", 2),
]

CATEGORIES = [
    {"category_id": "1", "category_name": "Sports", "parent_id": 0},
    {"category_id": "2", "category_name": "News", "parent_id": 0},
    {"category_id": "3", "category_name": "Entertainment", "parent_id": 0},
    {"category_id": "4", "category_name": "Documentaries", "parent_id": 0},
    {"category_id": "5", "category_name": "Football", "parent_id": 1},
]

MOVIES = [
    {
        "num": 1,
        "name": "Summer Adventure (2024)",
        "title": "Summer Adventure",
        "year": "2024",
        "stream_type": "movie",
        "stream_id": 935703,
        "stream_icon": "https://example-iptv.com/images/summer-adventure.jpg",
        "rating": 5.5,
        "rating_5based": 2.8,
        "added": "1740562532",
        "plot": "Four friends embark on an unforgettable journey across the coast.",
        "cast": "John Smith, Emily Johnson, Michael Brown, Sarah Davis",
        "director": "Robert Wilson",
        "genre": "Adventure, Comedy, Drama",
        "release_date": "2024-06-15",
        "youtube_trailer": "k2qgYK1CrkQ",
        "episode_run_time": 109,
        "category_id": "1",
        "category_ids": [1],
        "container_extension": "mp4",
        "custom_sid": "",
        "direct_source": "",
    },
    {
        "num": 2,
        "name": "The Last Stand (2023)",
        "title": "The Last Stand",
        "year": "2023",
        "stream_type": "movie",
        "stream_id": 935704,
        "stream_icon": "https://example-iptv.com/images/the-last-stand.jpg",
        "rating": 7.5,
        "rating_5based": 3.8,
        "added": "1740562532",
        "plot": "A retired sheriff and his team must protect their town.",
        "cast": "Robert Johnson, Sarah Adams, Michael Brown, Emily Davis",
        "director": "James Wilson",
        "genre": "Action, Crime, Thriller",
        "release_date": "2023-08-22",
        "youtube_trailer": "k2qgYK1CrkQ",
        "episode_run_time": 118,
        "category_id": "2",
        "category_ids": [2],
        "container_extension": "mp4",
        "custom_sid": "",
        "direct_source": "",
    },
]

MOVIE = {
    "info": {
        "kinopoisk_url": "https://www.themoviedb.org/movie/1022789",
        "tmdb_id": 1022789,
        "name": "Summer Adventure",
        "o_name": "Summer Adventure",
        "cover_big": "https://example-iptv.com/images/summer-adventure-big.jpg",
        "movie_image": "https://example-iptv.com/images/summer-adventure.jpg",
        "release_date": "2024-06-15",
        "releasedate": "2024-06-15",
        "episode_run_time": 109,
        "youtube_trailer": "k2qgYK1CrkQ",
        "director": "Robert Wilson",
        "actors": "John Smith, Emily Johnson",
        "cast": "John Smith, Emily Johnson",
        "description": "Four friends embark on an unforgettable journey across the coast.",
        "plot": "Four friends embark on an unforgettable journey across the coast.",
        "age": "12",
        "mpaa_rating": "PG-13",
        "rating_count_kinopoisk": 0,
        "country": "United States",
        "genre": "Adventure, Comedy, Drama",
        "backdrop_path": ["https://example-iptv.com/images/summer-adventure-backdrop.jpg"],
        "duration_secs": 6540,
        "duration": "01:49:00",
        "bitrate": 4870,
        "rating": 5.5,
        "subtitles": [],
    },
    "movie_data": {
        "stream_id": 935703,
        "name": "Summer Adventure (2024)",
        "title": "Summer Adventure",
        "year": "2024",
        "added": "1740562532",
        "category_id": "1",
        "category_ids": [1],
        "container_extension": "mkv",
        "custom_sid": "",
        "direct_source": "",
    },
}

MOVIE_NOT_FOUND = {"info": [], "movie_data": []}

SHOWS = [
    {
        "num": 1,
        "name": "Medical Heroes (2022)",
        "title": "Medical Heroes",
        "year": "2022",
        "stream_type": "series",
        "series_id": 15120,
        "cover": "https://example-iptv.com/images/medical-heroes-cover.jpg",
        "plot": "Follow the lives of dedicated medical professionals.",
        "cast": "Jennifer Adams, Richard Carter, Samantha Wright",
        "director": "",
        "genre": "Drama, Medical",
        "release_date": "2022-03-15",
        "releaseDate": "2022-03-15",
        "last_modified": "1740596715",
        "rating": "7",
        "rating_5based": 3.5,
        "backdrop_path": ["https://example-iptv.com/images/medical-heroes-backdrop.jpg"],
        "youtube_trailer": "",
        "episode_run_time": "88",
        "category_id": "1",
        "category_ids": [1],
    },
    {
        "num": 2,
        "name": "Small Town Stories (2025)",
        "title": "Small Town Stories",
        "year": "2025",
        "stream_type": "series",
        "series_id": 16083,
        "cover": "https://example-iptv.com/images/small-town-main.jpg",
        "plot": "A heartwarming drama about a close-knit small town.",
        "cast": "Elizabeth Parker, Michael Reynolds, Susan Thompson",
        "director": "",
        "genre": "Drama, Family",
        "release_date": "2025-02-24",
        "releaseDate": "2025-02-24",
        "last_modified": "1740591320",
        "rating": "0",
        "rating_5based": 0,
        "backdrop_path": ["https://example-iptv.com/images/small-town-backdrop.jpg"],
        "youtube_trailer": "",
        "episode_run_time": "37",
        "category_id": "2",
        "category_ids": [2],
    },
]


def _episode(id, num, season, release_date, duration_secs):
    return {
        "id": id,
        "episode_num": num,
        "title": f"Small Town Stories - S0{season}E0{num}",
        "container_extension": "mp4",
        "info": {
            "tmdb_id": 5197445 + int(num),
            "release_date": release_date,
            "plot": "The town prepares for the annual Founders Day celebration.",
            "duration_secs": duration_secs,
            "duration": "00:36:54",
            "movie_image": f"https://example-iptv.com/images/small-town-s0{season}e0{num}.jpg",
            "bitrate": 5244,
            "rating": 10,
            "season": season,
            "cover_big": f"https://example-iptv.com/images/small-town-s0{season}e0{num}-large.jpg",
        },
        "subtitles": [],
        "custom_sid": "",
        "added": "1740503721",
        "season": season,
        "direct_source": "",
    }


SHOW = {
    "seasons": [
        {
            "air_date": "2025-02-17",
            "episode_count": 5,
            "id": 442962,
            "name": "Specials",
            "overview": "",
            "season_number": 0,
            "vote_average": 0,
            "cover": "https://example-iptv.com/images/small-town-specials.jpg",
            "cover_big": "https://example-iptv.com/images/small-town-specials-large.jpg",
        },
        {
            "air_date": "2025-02-24",
            "episode_count": 15,
            "id": 382546,
            "name": "Season 1",
            "overview": "",
            "season_number": 1,
            "vote_average": 10,
            "cover": "https://example-iptv.com/images/small-town-s1.jpg",
            "cover_big": "https://example-iptv.com/images/small-town-s1-large.jpg",
        },
    ],
    "info": {
        "name": "Small Town Stories (2025)",
        "title": "Small Town Stories",
        "year": "2025",
        "cover": "https://example-iptv.com/images/small-town-main.jpg",
        "plot": "A heartwarming drama about a close-knit small town.",
        "cast": "Elizabeth Parker, Michael Reynolds, Susan Thompson",
        "director": "",
        "genre": "Drama, Family",
        "release_date": "2025-02-24",
        "releaseDate": "2025-02-24",
        "last_modified": "1740591320",
        "rating": "0",
        "rating_5based": 0,
        "backdrop_path": ["https://example-iptv.com/images/small-town-backdrop.jpg"],
        "youtube_trailer": "",
        "episode_run_time": "37",
        "category_id": "2",
        "category_ids": [2],
        "series_id": 16083,
    },
    "episodes": {
        "1": [
            _episode("935666", "1", 1, "2025-02-24", 2214),
            _episode("935727", "2", 1, "2025-02-25", 2209),
        ],
    },
}

# A panel that sends episodes but no seasons, and leaves series_id out of info
SHOW_WITHOUT_SEASONS = {
    "seasons": [],
    "info": {
        "name": "Night Shift (2021)",
        "title": "Night Shift",
        "cover": "https://example-iptv.com/images/night-shift.jpg",
        "cast": "Anna Lee",
        "director": "",
        "genre": "Drama",
        "release_date": "2021-09-01",
        "last_modified": "1740591320",
        "rating": "6",
        "backdrop_path": [],
        "episode_run_time": "45",
        "category_id": "1",
        "category_ids": [1],
    },
    "episodes": {
        "2": [_episode("3001", "1", 2, "2022-09-01", 2700)],
        "1": [
            _episode("2001", "1", 1, "2021-09-01", 2700),
            _episode("2002", "2", 1, "2021-09-08", 2700),
        ],
    },
}

SHOW_NOT_FOUND = {
    "seasons": [],
    "info": {
        "name": None,
        "title": None,
        "year": None,
        "cover": None,
        "plot": None,
        "cast": None,
        "director": None,
        "genre": None,
        "release_date": None,
        "releaseDate": None,
        "last_modified": None,
        "rating": "0",
        "rating_5based": 0,
        "backdrop_path": None,
        "youtube_trailer": None,
        "episode_run_time": None,
        "category_id": "",
        "category_ids": None,
    },
}


def _short_listing(id, start, end, start_ts, stop_ts, stop):
    return {
        "id": id,
        "epg_id": "63",
        "title": "ZmFrZSBwcm9ncmFtbWU=",
        "lang": "",
        "start": start,
        "end": end,
        "description": "ZmFrZSBkZXNjcmlwdGlvbg==",
        "channel_id": "C679.262.ersatztv.org",
        "start_timestamp": start_ts,
        "stop_timestamp": stop_ts,
        "stop": stop,
    }


SHORT_EPG = {
    "epg_listings": [
        _short_listing("17528639", "2025-03-03 13:57:02", "1741012393", "1741010222", "1741012393", "2025-03-03 14:33:13"),
        _short_listing("17528640", "2025-03-03 14:33:13", "1741014359", "1741012393", "1741014359", "2025-03-03 15:05:59"),
        _short_listing("17528641", "2025-03-03 15:05:59", "1741018869", "1741014359", "1741018869", "2025-03-03 16:21:09"),
        _short_listing("17528642", "2025-03-03 16:21:09", "1741021172", "1741018869", "1741021172", "2025-03-03 16:59:32"),
    ],
}

FULL_EPG = {
    "epg_listings": [
        {
            "id": "17528639",
            "epg_id": "63",
            "title": "ZmFrZSBwcm9ncmFtbWU=",
            "lang": "en",
            "start": "2025-03-03 13:57:02",
            "end": "2025-03-03 14:33:13",
            "description": "ZmFrZSBkZXNjcmlwdGlvbg==",
            "channel_id": "C679.262.ersatztv.org",
            "start_timestamp": "1741010222",
            "stop_timestamp": "1741012393",
            "now_playing": 1,
            "has_archive": 0,
        },
        {
            "id": "17528640",
            "epg_id": "63",
            "title": "ZmFrZSBwcm9ncmFtbWU=",
            "lang": "en",
            "start": "2025-03-03 14:33:13",
            "end": "2025-03-03 15:05:59",
            "description": "ZmFrZSBkZXNjcmlwdGlvbg==",
            "channel_id": "C679.262.ersatztv.org",
            "start_timestamp": "1741012393",
            "stop_timestamp": "1741014359",
            "now_playing": 0,
            "has_archive": 1,
        },
    ],
}
