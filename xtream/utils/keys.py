import re
from collections.abc import Mapping
from typing import Any

_SEPARATORS = re.compile(r"[_\-\s]+")
_DIGIT_THEN_LETTER = re.compile(r"(?<=\d)([a-z])")


def camelize(key: Any) -> Any:
    """
    Convert a snake_case (or kebab-case) key to camelCase.

    A letter following a digit run is upper-cased, so "rating_5based" becomes "rating5Based".
    Keys that are already camelCase come back unchanged. Non-string keys are returned as-is.
    """
    if not isinstance(key, str):
        return key

    words = [word for word in _SEPARATORS.split(key) if word]
    if not words:
        return key

    head, *tail = words
    head = head.lower() if head.isupper() else head[:1].lower() + head[1:]
    tail = [word.lower() if word.isupper() else word for word in tail]
    result = head + "".join(word[:1].upper() + word[1:] for word in tail)
    return _DIGIT_THEN_LETTER.sub(lambda m: m.group(1).upper(), result)


def normalize_keys(value: Any, deep: bool = False) -> Any:
    """
    Camel-case the keys of a mapping, or of every mapping in a list.

    With deep=True nested mappings and lists are converted too.
    Values are never touched, only keys.
    """
    if isinstance(value, list):
        return [normalize_keys(item, deep=deep) for item in value]
    if isinstance(value, Mapping):
        return {camelize(k): (normalize_keys(v, deep=True) if deep else v) for k, v in value.items()}
    return value
