import math
from typing import List, Sequence

from src.domain.models import PluginSummary

ITEMS_PER_PAGE = 12


def matches(plugin: PluginSummary, search_term: str) -> bool:
    """Case-insensitive substring match against name, description and owner."""
    needle = search_term.casefold()
    return (
        needle in plugin.name.casefold()
        or needle in plugin.description.casefold()
        or needle in plugin.owner.casefold()
    )


def filter_plugins(items: Sequence[PluginSummary], search_term: str) -> List[PluginSummary]:
    """
    Filters the currently loaded page of plugins.

    Only the items already fetched are searched; other registry pages are not
    consulted. An empty term keeps every item in its original order.
    """
    if not search_term:
        return list(items)
    return [plugin for plugin in items if matches(plugin, search_term)]


def count_pages(filtered_count: int, items_per_page: int = ITEMS_PER_PAGE) -> int:
    return max(1, math.ceil(filtered_count / items_per_page))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, 1), max(total_pages, 1))


def paginate(
    filtered: Sequence[PluginSummary],
    current_page: int,
    items_per_page: int = ITEMS_PER_PAGE,
) -> List[PluginSummary]:
    """
    Returns the slice of `filtered` shown on `current_page`.

    A page past the end yields an empty list; callers decide whether to clamp.
    """
    if current_page < 1:
        raise ValueError(f"current_page must be >= 1, got {current_page}")
    start_index = (current_page - 1) * items_per_page
    return list(filtered[start_index:start_index + items_per_page])
