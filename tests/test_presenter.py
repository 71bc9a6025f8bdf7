import unittest
from datetime import datetime, timezone

from src.application.install_command import InstallCommandHelper
from src.application.presenter import (
    COPIED_LABEL,
    COPY_LABEL,
    FIXTURE_NOTICE,
    build_page_view,
    format_date,
    format_search_stats,
    render_text,
)
from src.application.store_service import FETCH_ERROR_MESSAGE, PluginStoreController
from src.domain.exceptions import RegistryError
from src.domain.models import PageResult, PluginSummary


class _StaticRegistryClient:
    def __init__(self, result: PageResult = None, error: Exception = None) -> None:
        self.result = result
        self.error = error

    async def fetch_page(self, session, page=1, per_page=12, use_fixture_data=False):
        if self.error is not None:
            raise self.error
        return self.result


class _RecordingClipboard:
    def __init__(self) -> None:
        self.writes = []

    async def write(self, text: str) -> None:
        self.writes.append(text)


def _plugin(name: str, owner: str = "WaveYo", **kwargs) -> PluginSummary:
    return PluginSummary(full_name=f"{owner}/{name}", name=name, owner=owner, **kwargs)


def _controller(result=None, error=None, clipboard=None, **kwargs) -> PluginStoreController:
    return PluginStoreController(
        registry_client=_StaticRegistryClient(result, error),
        install_helper=InstallCommandHelper(clipboard or _RecordingClipboard(), feedback_seconds=10),
        session=object(),
        **kwargs,
    )


class TestFormatting(unittest.TestCase):
    def test_format_date(self) -> None:
        self.assertEqual(format_date(datetime(2025, 7, 3, 9, 0, tzinfo=timezone.utc)), "2025/07/03")
        self.assertEqual(format_date(None), "unknown")

    def test_search_stats_wording(self) -> None:
        self.assertEqual(format_search_stats(1), "found 1 matching plugin")
        self.assertEqual(format_search_stats(0), "found 0 matching plugins")
        self.assertEqual(format_search_stats(3), "found 3 matching plugins")


class TestBuildPageView(unittest.IsolatedAsyncioTestCase):
    async def test_loading_branch(self) -> None:
        view = build_page_view(_controller())

        self.assertEqual(view.branch, "loading")
        self.assertEqual(view.cards, [])

    async def test_error_branch_has_no_cards(self) -> None:
        controller = _controller(error=RegistryError(status_code=500))
        with self.assertLogs("src.application.store_service", level="ERROR"):
            await controller.load()

        view = build_page_view(controller)

        self.assertEqual(view.branch, "error")
        self.assertEqual(view.message, FETCH_ERROR_MESSAGE)
        self.assertEqual(view.cards, [])
        self.assertIsNone(view.pagination)

    async def test_fixture_page_hides_pagination(self) -> None:
        result = PageResult(items=[_plugin("a"), _plugin("b"), _plugin("c")], total_count=3)
        controller = _controller(result, use_fixture_data=True)
        await controller.load()

        view = build_page_view(controller)

        self.assertEqual(view.branch, "ready")
        self.assertEqual(len(view.cards), 3)
        self.assertIsNone(view.pagination)
        self.assertIsNone(view.search_stats)
        self.assertEqual(view.fixture_notice, FIXTURE_NOTICE)

    async def test_search_stats_for_matching_plugin(self) -> None:
        result = PageResult(items=[_plugin("yoapi_plugin_log"), _plugin("yoapi_plugin_utils")], total_count=2)
        controller = _controller(result)
        await controller.load()
        controller.set_search_term("log")

        view = build_page_view(controller)

        self.assertEqual([card.name for card in view.cards], ["yoapi_plugin_log"])
        self.assertEqual(view.search_stats, "found 1 matching plugin")

    async def test_registry_with_next_page_shows_pagination(self) -> None:
        items = [_plugin(f"p{i}") for i in range(12)]
        controller = _controller(PageResult(items=items, total_count=50, has_next_page=True))
        await controller.load()

        view = build_page_view(controller)

        self.assertIsNotNone(view.pagination)
        self.assertTrue(view.pagination.has_next)
        self.assertFalse(view.pagination.has_previous)
        self.assertEqual(view.pagination.label, "page 1 of 1")

    async def test_card_fields_and_copy_label(self) -> None:
        plugin = _plugin(
            "yoapi_plugin_demoapi",
            description="Demo",
            language="Python",
            html_url="https://github.com/WaveYo/yoapi_plugin_demoapi",
            stargazers_count=12,
            forks_count=3,
            updated_at=datetime(2025, 7, 28, tzinfo=timezone.utc),
        )
        clipboard = _RecordingClipboard()
        controller = _controller(PageResult(items=[plugin], total_count=1), clipboard=clipboard)
        await controller.load()

        card = build_page_view(controller).cards[0]
        self.assertEqual(card.button_label, COPY_LABEL)
        self.assertEqual(card.install_command, "yoapi install WaveYo/yoapi_plugin_demoapi")
        self.assertEqual(card.updated, "2025/07/28")
        self.assertEqual(card.stars, 12)

        await controller.copy_install_command(card.full_name, card.index)
        card = build_page_view(controller).cards[0]

        self.assertEqual(clipboard.writes, ["yoapi install WaveYo/yoapi_plugin_demoapi"])
        self.assertTrue(card.copied)
        self.assertEqual(card.button_label, COPIED_LABEL)
        await controller.close()


class TestRenderText(unittest.IsolatedAsyncioTestCase):
    async def test_renders_cards_and_stats(self) -> None:
        result = PageResult(items=[_plugin("yoapi_plugin_log", language="Python")], total_count=1)
        controller = _controller(result)
        await controller.load()
        controller.set_search_term("log")

        text = render_text(build_page_view(controller))

        self.assertIn("yoapi_plugin_log by WaveYo [Python]", text)
        self.assertIn("yoapi install WaveYo/yoapi_plugin_log", text)
        self.assertIn("found 1 matching plugin", text)

    async def test_renders_error_message(self) -> None:
        controller = _controller(error=RegistryError("boom"))
        with self.assertLogs("src.application.store_service", level="ERROR"):
            await controller.load()

        text = render_text(build_page_view(controller))

        self.assertIn(FETCH_ERROR_MESSAGE, text)
        self.assertNotIn("boom", text)
