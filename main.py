import asyncio
import json
import sys

from loguru import logger
from pydantic import BaseModel

from xtream import Xtream

RESOURCES = {
    "profile": lambda client: client.get_profile(),
    "server-info": lambda client: client.get_server_info(),
    "channel-categories": lambda client: client.get_channel_categories(),
    "movie-categories": lambda client: client.get_movie_categories(),
    "show-categories": lambda client: client.get_show_categories(),
    "channels": lambda client: client.get_channels(),
    "movies": lambda client: client.get_movies(),
    "shows": lambda client: client.get_shows(),
}


def to_jsonable(value):
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


async def run(resource: str) -> None:
    async with Xtream.from_settings() as client:
        result = await RESOURCES[resource](client)
    print(json.dumps(to_jsonable(result), indent=2, default=str))


if __name__ == "__main__":
    name = sys.argv[1] if len(sys.argv) > 1 else "profile"
    if name not in RESOURCES:
        logger.error(f"Unknown resource '{name}', expected one of: {', '.join(RESOURCES)}")
        sys.exit(1)
    asyncio.run(run(name))
