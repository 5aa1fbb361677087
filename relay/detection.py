import re
from typing import Tuple

from .constants import (
    BASE_TAG,
    DEFAULT_CATEGORY,
    DEFAULT_TAGS,
    PRIORITY_DEFAULT,
    PRIORITY_RULES,
    TAG_RULES,
)

_CATEGORY_RE = re.compile(r'\[([^\]]+)\]\s*(.+)\Z')


def parse_query_name(full_name: str) -> Tuple[str, str]:
    """
    Extrai (categoria, nome) do nome completo da query.
    Ex.: "pack/Global/[detection/persistence] Unexpected Device Linux"
         -> ("detection/persistence", "Unexpected Device Linux")
    Sem colchetes, usa o último trecho após "/" e categoria "alert".
    """
    match = _CATEGORY_RE.search(full_name)
    if match:
        return match.group(1), match.group(2)
    return DEFAULT_CATEGORY, full_name.split('/')[-1]


def get_priority(category: str) -> int:
    category = category.lower()
    for needle, priority in PRIORITY_RULES:
        if needle in category:
            return priority
    return PRIORITY_DEFAULT


def get_tags(category):
    category = category.lower()
    for needle, tags in TAG_RULES:
        if needle in category:
            return [BASE_TAG] + list(tags)
    return [BASE_TAG] + list(DEFAULT_TAGS)


def classify(category):
    return get_priority(category), get_tags(category)
