import unittest

from pydantic import TypeAdapter, ValidationError

from src.domain.models import ErrorState, LoadingState, ReadyState, ViewState


class TestViewState(unittest.TestCase):
    def setUp(self) -> None:
        self.adapter = TypeAdapter(ViewState)

    def test_status_selects_the_state_model(self) -> None:
        self.assertIsInstance(self.adapter.validate_python({"status": "loading"}), LoadingState)
        self.assertIsInstance(self.adapter.validate_python({"status": "ready"}), ReadyState)

        state = self.adapter.validate_python({"status": "error", "message": "failed"})
        self.assertIsInstance(state, ErrorState)
        self.assertEqual(state.message, "failed")

    def test_unknown_status_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.adapter.validate_python({"status": "stale"})
