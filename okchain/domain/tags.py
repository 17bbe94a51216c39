# okchain/domain/tags.py
from __future__ import annotations

from typing import Any, List, Tuple

from okchain.domain.exceptions import InvalidTags


def normalize_tags(*tags: Any) -> List[Any]:
    """
    Ordered tag list from any of the accepted forms:

        normalize_tags("tag")                  -> ["tag"]
        normalize_tags("tag", "sub_tag")       -> ["tag", "sub_tag"]
        normalize_tags(["t1", "t2", "t3"])     -> ["t1", "t2", "t3"]
    """
    if not tags:
        raise InvalidTags("at least one tag is required")
    if len(tags) == 1:
        only = tags[0]
        if isinstance(only, list):
            if not only:
                raise InvalidTags("tag list is empty")
            return list(only)
        return [only]
    return list(tags)


def flatten(tags: List[Any], payload: Any) -> Tuple[Any, ...]:
    return tuple(tags) + (payload,)
