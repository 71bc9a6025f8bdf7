import aiohttp
import asyncio
import logging
from typing import Optional

from src.domain.exceptions import RegistryError
from src.domain.models import PageResult
from src.infrastructure.acl import PluginTranslator
from src.infrastructure.fixtures import load_fixture_page

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://api.waveyo.store"
PLUGIN_LIST_PATH = "/api/github/plugin_list"
PER_PAGE = 12
DEFAULT_TIMEOUT_SECONDS = 10.0

class PluginRegistryClient:
    """
    Client for the WaveYo plugin registry.
    Fetches one page of plugins at a time, or serves the bundled fixture list.
    """

    def __init__(self, base_url: str = DEFAULT_REGISTRY_URL, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS):
        self.headers = {
            "Accept": "application/json",
            "User-Agent": "yoapi-plugin-store",
        }
        self.api_url = base_url.rstrip("/") + PLUGIN_LIST_PATH
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_page(
        self,
        session: Optional[aiohttp.ClientSession],
        page: int = 1,
        per_page: int = PER_PAGE,
        use_fixture_data: bool = False,
    ) -> PageResult:
        """
        Fetches a single page of plugins.

        Args:
            session: Open aiohttp session; unused in fixture mode.
            page (int): 1-based server page number.
            per_page (int): Page size requested from the registry.
            use_fixture_data (bool): Serve the bundled fixture list instead of calling the registry.

        Returns:
            PageResult: The normalized page.

        Raises:
            RegistryError: On network failure, timeout, non-2xx status or a malformed body.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if per_page < 1:
            raise ValueError(f"per_page must be >= 1, got {per_page}")

        if use_fixture_data:
            logger.info("Serving plugin list from fixture data.")
            return load_fixture_page()

        if session is None:
            raise RegistryError("No HTTP session available for the registry request.")

        params = {"page": str(page), "per_page": str(per_page)}
        try:
            async with session.get(self.api_url, params=params, headers=self.headers, timeout=self.timeout) as response:
                if not 200 <= response.status < 300:
                    raise RegistryError(status_code=response.status)
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RegistryError(f"Registry request failed: {e!r}") from e
        except ValueError as e:
            # Body is not valid JSON
            raise RegistryError(f"Registry response is not valid JSON: {e}") from e

        result = PluginTranslator.to_page(data)

        if len(result.items) > per_page:
            logger.warning(
                f"Registry returned {len(result.items)} items for page {page} "
                f"(requested {per_page}). Dropping the excess."
            )
            result = result.model_copy(update={"items": result.items[:per_page]})

        logger.info(
            f"Fetched page {page}: {len(result.items)} plugins, "
            f"total {result.total_count}, has next page: {result.has_next_page}."
        )
        return result
