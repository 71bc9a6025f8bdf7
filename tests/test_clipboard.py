import unittest
from unittest.mock import patch

import pyperclip

from src.domain.exceptions import ClipboardError
from src.infrastructure.clipboard import SystemClipboard


class TestSystemClipboard(unittest.IsolatedAsyncioTestCase):
    async def test_write_delegates_to_pyperclip(self) -> None:
        with patch("src.infrastructure.clipboard.pyperclip.copy") as mock_copy:
            await SystemClipboard().write("yoapi install WaveYo/yoapi_plugin_log")

        mock_copy.assert_called_once_with("yoapi install WaveYo/yoapi_plugin_log")

    async def test_missing_mechanism_raises_clipboard_error(self) -> None:
        with patch(
            "src.infrastructure.clipboard.pyperclip.copy",
            side_effect=pyperclip.PyperclipException("no copy/paste mechanism"),
        ):
            with self.assertRaises(ClipboardError):
                await SystemClipboard().write("yoapi install WaveYo/a")
