"""
Builds the render model of the plugin store page and a plain-text rendering of it.

Exactly one branch of the page is populated at a time, chosen from the
controller's view state: a loading notice, an error panel, or the card grid.
"""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.application.install_command import build_install_command
from src.application.store_service import PluginStoreController
from src.domain.models import ErrorState, PluginSummary, ReadyState

PAGE_TITLE = "Plugin Store"
PAGE_DESCRIPTION = "Discover and install quality plugins for the WaveYo-API ecosystem"
LOADING_TEXT = "Loading..."
FIXTURE_NOTICE = "Showing fixture data for testing"
COPY_LABEL = "Copy install command"
COPIED_LABEL = "Install command copied"


class PluginCardView(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    full_name: str
    name: str
    owner: str
    description: str
    language: Optional[str] = None
    html_url: str
    stars: int
    forks: int
    updated: str
    install_command: str
    button_label: str
    copied: bool = False


class PaginationView(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    label: str


class StorePageView(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = PAGE_TITLE
    description: str = PAGE_DESCRIPTION
    branch: Literal["loading", "error", "ready"]
    message: Optional[str] = None
    search_term: str = ""
    cards: List[PluginCardView] = Field(default_factory=list)
    search_stats: Optional[str] = None
    pagination: Optional[PaginationView] = None
    fixture_notice: Optional[str] = None


def format_date(value: Optional[datetime]) -> str:
    if value is None:
        return "unknown"
    return value.strftime("%Y/%m/%d")


def format_search_stats(count: int) -> str:
    noun = "plugin" if count == 1 else "plugins"
    return f"found {count} matching {noun}"


def build_card(plugin: PluginSummary, index: int, copied: bool) -> PluginCardView:
    return PluginCardView(
        index=index,
        full_name=plugin.full_name,
        name=plugin.name,
        owner=plugin.owner,
        description=plugin.description,
        language=plugin.language,
        html_url=plugin.html_url,
        stars=plugin.stargazers_count,
        forks=plugin.forks_count,
        updated=format_date(plugin.updated_at),
        install_command=build_install_command(plugin.full_name),
        button_label=COPIED_LABEL if copied else COPY_LABEL,
        copied=copied,
    )


def build_page_view(controller: PluginStoreController) -> StorePageView:
    state = controller.state
    if isinstance(state, ErrorState):
        return StorePageView(branch="error", message=state.message)
    if not isinstance(state, ReadyState):
        return StorePageView(branch="loading", message=LOADING_TEXT)

    search_term = controller.search.search_term
    filtered = controller.filtered_plugins()
    total_pages = controller.total_pages()
    current_page = controller.search.current_page
    helper = controller.install_helper

    cards = [
        build_card(plugin, index, helper.is_copied(index))
        for index, plugin in enumerate(controller.visible_plugins())
    ]

    pagination = None
    if total_pages > 1 or controller.can_go_next() or controller.can_go_previous():
        pagination = PaginationView(
            current_page=current_page,
            total_pages=total_pages,
            has_previous=controller.can_go_previous(),
            has_next=controller.can_go_next(),
            label=f"page {current_page} of {total_pages}",
        )

    return StorePageView(
        branch="ready",
        search_term=search_term,
        cards=cards,
        search_stats=format_search_stats(len(filtered)) if search_term else None,
        pagination=pagination,
        fixture_notice=FIXTURE_NOTICE if controller.use_fixture_data else None,
    )


def render_text(view: StorePageView) -> str:
    """Renders the page view as plain text for a terminal."""
    lines = [view.title, view.description, ""]

    if view.branch != "ready":
        lines.append(view.message or "")
        return "\n".join(lines) + "\n"

    if view.fixture_notice:
        lines.extend([f"[{view.fixture_notice}]", ""])
    if view.search_term:
        lines.extend([f"Search: {view.search_term}", ""])

    for card in view.cards:
        header = f"{card.name} by {card.owner}"
        if card.language:
            header += f" [{card.language}]"
        lines.append(header)
        if card.description:
            lines.append(f"  {card.description}")
        lines.append(f"  stars: {card.stars}  forks: {card.forks}  updated: {card.updated}")
        lines.append(f"  {card.html_url}")
        lines.append(f"  {card.button_label}: {card.install_command}")
        lines.append("")

    if view.search_stats:
        lines.append(view.search_stats)
    if view.pagination:
        lines.append(view.pagination.label)

    return "\n".join(lines).rstrip() + "\n"
