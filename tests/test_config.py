import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from src.config import load_settings


class TestLoadSettings(unittest.TestCase):
    def _load(self, env):
        with patch("src.config.load_dotenv"), patch.dict(os.environ, env, clear=True):
            return load_settings()

    def test_defaults(self) -> None:
        settings = self._load({})

        self.assertEqual(str(settings.registry_url).rstrip("/"), "https://api.waveyo.store")
        self.assertFalse(settings.use_fixture_data)
        self.assertEqual(settings.timeout_seconds, 10.0)

    def test_reads_environment(self) -> None:
        settings = self._load({
            "PLUGIN_REGISTRY_URL": "https://registry.example",
            "USE_FIXTURE_DATA": "true",
            "REGISTRY_TIMEOUT_SECONDS": "2.5",
        })

        self.assertEqual(settings.registry_url.host, "registry.example")
        self.assertTrue(settings.use_fixture_data)
        self.assertEqual(settings.timeout_seconds, 2.5)

    def test_invalid_flag_raises(self) -> None:
        with self.assertRaises(ValidationError):
            self._load({"USE_FIXTURE_DATA": "maybe"})

    def test_non_positive_timeout_raises(self) -> None:
        with self.assertRaises(ValidationError):
            self._load({"REGISTRY_TIMEOUT_SECONDS": "0"})
