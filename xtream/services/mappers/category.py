from typing import Any

from xtream.services.mappers.common import require
from xtream.utils.fields import to_str_id
from xtream.utils.keys import normalize_keys


def map_category(category: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize a live, VOD or series category.

    parentId is only present when the provider gives a truthy parent; 0 marks a root category.
    """
    data = normalize_keys(category)

    record = {
        "id": to_str_id(require(data, "categoryId", "category")),
        "name": data.get("categoryName"),
    }

    parent_id = data.get("parentId")
    if parent_id and str(parent_id) != "0":
        record["parentId"] = to_str_id(parent_id)

    return record
