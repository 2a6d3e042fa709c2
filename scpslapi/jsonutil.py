import json
from typing import Any, List


class JSONObject(dict):
    """
    dict that remembers every value of keys which occur more than once in the source document. A plain dict keeps
    only the last one.
    """

    def __init__(self, pairs=()):
        pairs = list(pairs)

        super().__init__(pairs)

        self._all_values = {}

        for key, value in pairs:
            self._all_values.setdefault(key, []).append(value)

    def get_all(self, key) -> List[Any]:
        return list(self._all_values.get(key, []))


def get_all(data: dict, key) -> List[Any]:
    """
    Return all values stored for key in document order. Works for plain dicts as well.
    """

    if isinstance(data, JSONObject):
        return data.get_all(key)

    if key in data:
        return [data[key]]

    return []


def loads(text: str):
    # raises ValueError (json.JSONDecodeError) on invalid input, callers translate that
    return json.loads(text, object_pairs_hook=JSONObject)


def dumps(data) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
