import asyncio
import logging
from typing import Optional, Protocol

from src.domain.exceptions import ClipboardError
from src.domain.models import CopyFeedbackState

logger = logging.getLogger(__name__)

CLI_NAME = "yoapi"
COPY_FEEDBACK_SECONDS = 3.0


class ClipboardWriter(Protocol):
    async def write(self, text: str) -> None: ...


def build_install_command(full_name: str) -> str:
    return f"{CLI_NAME} install {full_name}"


class InstallCommandHelper:
    """
    Copies install commands to the clipboard and tracks which card was copied last.

    At most one card index is marked at a time. A new copy cancels the pending
    expiry of the previous one, and an expiry only clears the mark it set.
    """

    def __init__(self, clipboard: ClipboardWriter, feedback_seconds: float = COPY_FEEDBACK_SECONDS):
        self.clipboard = clipboard
        self.feedback_seconds = feedback_seconds
        self.state = CopyFeedbackState()
        self._expiry_task: Optional[asyncio.Task] = None
        self._request_seq = 0

    def is_copied(self, index: int) -> bool:
        return self.state.copied_index == index

    async def copy(self, full_name: str, index: int) -> bool:
        """
        Writes the install command for `full_name` to the clipboard.

        Args:
            full_name (str): Plugin identifier of the form owner/name.
            index (int): Card that triggered the copy, used only for feedback.

        Returns:
            bool: True when the clipboard was written and the card marked as copied.
            False when the write failed or a newer copy was requested meanwhile.
        """
        self._request_seq += 1
        request_seq = self._request_seq
        command = build_install_command(full_name)
        try:
            await self.clipboard.write(command)
        except ClipboardError as e:
            logger.error(f"Failed to copy install command for {full_name}: {e}")
            return False

        if request_seq != self._request_seq:
            logger.debug(f"Copy of {full_name} superseded by a newer request, leaving feedback as is.")
            return False

        self._cancel_expiry()
        self.state = CopyFeedbackState(copied_index=index)
        self._expiry_task = asyncio.create_task(self._expire(index))
        logger.info(f"Copied install command: {command}")
        return True

    async def _expire(self, index: int) -> None:
        await asyncio.sleep(self.feedback_seconds)
        if self.state.copied_index == index:
            self.state = CopyFeedbackState()
        if self._expiry_task is asyncio.current_task():
            self._expiry_task = None

    def _cancel_expiry(self) -> None:
        if self._expiry_task is not None and not self._expiry_task.done():
            self._expiry_task.cancel()
        self._expiry_task = None

    def reset(self) -> None:
        """Cancels any pending expiry and clears the copied mark."""
        self._request_seq += 1
        self._cancel_expiry()
        self.state = CopyFeedbackState()
