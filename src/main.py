import asyncio
import sys
import logging
from pydantic import ValidationError

from src.config import load_settings
from src.infrastructure.clipboard import SystemClipboard
from src.infrastructure.registry_client import PluginRegistryClient
from src.application.install_command import InstallCommandHelper
from src.application.presenter import build_page_view, render_text
from src.application.store_service import PluginStoreController

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

async def main():
    # Load settings from the environment and an optional .env file
    try:
        settings = load_settings()
    except ValidationError as e:
        logger.error(f"Invalid plugin store settings: {e}")
        sys.exit(1)

    registry_client = PluginRegistryClient(
        base_url=str(settings.registry_url),
        timeout_seconds=settings.timeout_seconds,
    )
    install_helper = InstallCommandHelper(clipboard=SystemClipboard())

    async with PluginStoreController(
        registry_client=registry_client,
        install_helper=install_helper,
        use_fixture_data=settings.use_fixture_data,
    ) as store:
        await store.load()
        print(render_text(build_page_view(store)))

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted by user. Exiting.")
