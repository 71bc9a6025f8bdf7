import logging
from typing import List, Optional
import aiohttp

from src.application.filtering import ITEMS_PER_PAGE, clamp_page, count_pages, filter_plugins, paginate
from src.application.install_command import InstallCommandHelper
from src.domain.exceptions import RegistryError
from src.domain.models import ErrorState, LoadingState, PluginSummary, ReadyState, SearchState, ViewState
from src.infrastructure.registry_client import PER_PAGE, PluginRegistryClient

logger = logging.getLogger(__name__)

# Shown to the user for any registry failure; the cause goes to the log only.
FETCH_ERROR_MESSAGE = "failed to fetch metadata, check your network"


class PluginStoreController:
    """
    Owns the state of the plugin store page and drives its transitions.

    The view state moves Loading -> Ready or Loading -> Error on each fetch.
    Fetches are triggered by mounting, changing the server page, or toggling
    the data source. Searching only filters the page already loaded.

    Each fetch is tagged with a generation number. A response whose generation
    is no longer the latest is dropped, so an older request finishing after a
    newer one never overwrites the view.
    """

    def __init__(
            self,
            registry_client: PluginRegistryClient,
            install_helper: InstallCommandHelper,
            session: Optional[aiohttp.ClientSession] = None,
            use_fixture_data: bool = False,
            items_per_page: int = ITEMS_PER_PAGE,
            per_page: int = PER_PAGE,
    ):
        self.registry_client = registry_client
        self.install_helper = install_helper
        self.use_fixture_data = use_fixture_data
        self.items_per_page = items_per_page
        self.per_page = per_page

        self.state: ViewState = LoadingState()
        self.search = SearchState()
        # Server page requested from the registry; SearchState.current_page is the client page
        self.page = 1

        self._session = session
        self._owns_session = session is None
        self._generation = 0

    async def __aenter__(self) -> "PluginStoreController":
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        await self.close()
        return False

    async def close(self) -> None:
        """Tears the page down: in-flight results are discarded from now on."""
        self._generation += 1
        self.install_helper.reset()
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    # Derived values

    def filtered_plugins(self) -> List[PluginSummary]:
        items = self.state.items if isinstance(self.state, ReadyState) else []
        return filter_plugins(items, self.search.search_term)

    def total_pages(self) -> int:
        return count_pages(len(self.filtered_plugins()), self.items_per_page)

    def visible_plugins(self) -> List[PluginSummary]:
        return paginate(self.filtered_plugins(), self.search.current_page, self.items_per_page)

    def can_go_next(self) -> bool:
        if not isinstance(self.state, ReadyState):
            return False
        return self.search.current_page < self.total_pages() or self.state.has_next_page

    def can_go_previous(self) -> bool:
        return self.search.current_page > 1 or (self.page > 1 and not self.use_fixture_data)

    # Transitions

    async def load(self) -> ViewState:
        """Fetches the current server page. Called on mount and to retry after an error."""
        return await self._fetch()

    async def go_to_page(self, page: int) -> ViewState:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        self.page = page
        self.search = self.search.model_copy(update={"current_page": 1})
        return await self._fetch()

    async def set_use_fixture_data(self, use_fixture_data: bool) -> ViewState:
        if use_fixture_data == self.use_fixture_data:
            return self.state
        self.use_fixture_data = use_fixture_data
        self.search = self.search.model_copy(update={"current_page": 1})
        return await self._fetch()

    def set_search_term(self, search_term: str) -> None:
        """Filters the loaded page; never triggers a fetch."""
        filtered_count = len(filter_plugins(
            self.state.items if isinstance(self.state, ReadyState) else [], search_term
        ))
        current_page = clamp_page(self.search.current_page, count_pages(filtered_count, self.items_per_page))
        self.search = SearchState(search_term=search_term, current_page=current_page)

    async def next_page(self) -> ViewState:
        """
        Moves forward one page.

        Stays on the loaded data while it has more client pages; past the last
        one, fetches the next server page if the registry reports one.
        """
        if not isinstance(self.state, ReadyState):
            return self.state
        if self.search.current_page < self.total_pages():
            self.search = self.search.model_copy(update={"current_page": self.search.current_page + 1})
            return self.state
        if self.state.has_next_page and not self.use_fixture_data:
            return await self.go_to_page(self.page + 1)
        return self.state

    async def previous_page(self) -> ViewState:
        if self.search.current_page > 1:
            self.search = self.search.model_copy(update={"current_page": self.search.current_page - 1})
            return self.state
        if self.page > 1 and not self.use_fixture_data:
            return await self.go_to_page(self.page - 1)
        return self.state

    async def copy_install_command(self, full_name: str, index: int) -> bool:
        return await self.install_helper.copy(full_name, index)

    async def _fetch(self) -> ViewState:
        self._generation += 1
        generation = self._generation
        page = self.page
        use_fixture_data = self.use_fixture_data

        self.state = LoadingState()
        try:
            result = await self.registry_client.fetch_page(
                self._session, page, self.per_page, use_fixture_data=use_fixture_data
            )
        except RegistryError as e:
            if generation != self._generation:
                logger.debug(f"Discarding stale failure for page {page}: {e}")
                return self.state
            logger.error(f"Failed to fetch plugin list for page {page}: {e}")
            self.state = ErrorState(message=FETCH_ERROR_MESSAGE)
            return self.state

        if generation != self._generation:
            logger.debug(f"Discarding stale response for page {page}.")
            return self.state

        self.state = ReadyState(
            items=result.items,
            total_count=result.total_count,
            has_next_page=result.has_next_page,
        )
        # A reloaded page may hold fewer items than the one the client page was chosen for
        self.search = self.search.model_copy(
            update={"current_page": clamp_page(self.search.current_page, self.total_pages())}
        )
        return self.state
