# robot_api/core/pagination.py
# -*- coding: utf-8 -*-
"""
Robot Grid API — Action log pagination
--------------------------------------
Page `page` (1-based) of size `size` covers records

    [(page - 1) * size, (page - 1) * size + size)

clamped to the log length. A page past the end is simply empty.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def paginate(records: Sequence[T], page: int, size: int) -> Tuple[List[T], int]:
    """
    Return (records on `page`, total record count).

    Raises ValueError if page or size is below 1; the router validates
    both before calling, so this only guards direct callers.
    """
    if page < 1 or size < 1:
        raise ValueError(f"page and size must be >= 1 (got page={page}, size={size})")

    start = (page - 1) * size
    return list(records[start:start + size]), len(records)


def actions_path(robot_id: int, page: int, size: int) -> str:
    return f"/robot/{robot_id}/actions?page={page}&size={size}"


def build_action_links(robot_id: int, page: int, size: int) -> Dict[str, Optional[str]]:
    """
    Navigation links for one page of a robot's action log.

    `next` always points one page further (it may be empty);
    `previous` is None on the first page.
    """
    return {
        "self": actions_path(robot_id, page, size),
        "next": actions_path(robot_id, page + 1, size),
        "previous": actions_path(robot_id, page - 1, size) if page > 1 else None,
    }
