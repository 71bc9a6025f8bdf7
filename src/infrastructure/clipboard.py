import asyncio
import logging
import pyperclip

from src.domain.exceptions import ClipboardError

logger = logging.getLogger(__name__)

class SystemClipboard:
    """Writes text to the system clipboard through pyperclip."""

    async def write(self, text: str) -> None:
        # pyperclip shells out to xclip/pbcopy and friends, keep it off the event loop
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard write failed: {e}") from e
        logger.debug(f"Copied {len(text)} characters to the clipboard.")
