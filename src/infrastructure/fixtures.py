from typing import Any, Dict, List

from src.domain.models import PageResult
from src.infrastructure.acl import PluginTranslator

# Bundled plugin entries, same shape as the registry's `items` array.
# Served in place of the registry when fixture data is enabled.
FIXTURE_PLUGINS: List[Dict[str, Any]] = [
    {
        "name": "yoapi_plugin_demoapi",
        "description": "Example plugin showing how to register routes and hooks",
        "owner": "WaveYo",
        "full_name": "WaveYo/yoapi_plugin_demoapi",
        "html_url": "https://github.com/WaveYo/yoapi_plugin_demoapi",
        "language": "Python",
        "stargazers_count": 12,
        "forks_count": 3,
        "updated_at": "2025-07-28T09:15:00Z",
    },
    {
        "name": "yoapi_plugin_log",
        "description": "Structured request logging with rotating file output",
        "owner": "WaveYo",
        "full_name": "WaveYo/yoapi_plugin_log",
        "html_url": "https://github.com/WaveYo/yoapi_plugin_log",
        "language": "Python",
        "stargazers_count": 8,
        "forks_count": 1,
        "updated_at": "2025-07-30T14:02:41Z",
    },
    {
        "name": "yoapi_plugin_utils",
        "description": "Shared helpers for configuration, paths and environment access",
        "owner": "WaveYo",
        "full_name": "WaveYo/yoapi_plugin_utils",
        "html_url": "https://github.com/WaveYo/yoapi_plugin_utils",
        "language": "Python",
        "stargazers_count": 5,
        "forks_count": 0,
        "updated_at": "2025-06-11T08:40:12Z",
    },
    {
        "name": "yoapi_plugin_scheduler",
        "description": "Cron style background jobs for WaveYo-API",
        "owner": "Lumina-dev",
        "full_name": "Lumina-dev/yoapi_plugin_scheduler",
        "html_url": "https://github.com/Lumina-dev/yoapi_plugin_scheduler",
        "language": "Python",
        "stargazers_count": 21,
        "forks_count": 4,
        "updated_at": "2025-05-02T17:23:09Z",
    },
    {
        "name": "yoapi_plugin_webui",
        "description": "Browser dashboard for inspecting loaded plugins",
        "owner": "kaede-studio",
        "full_name": "kaede-studio/yoapi_plugin_webui",
        "html_url": "https://github.com/kaede-studio/yoapi_plugin_webui",
        "language": "TypeScript",
        "stargazers_count": 34,
        "forks_count": 7,
        "updated_at": "2025-08-03T21:10:55Z",
    },
]


def load_fixture_page() -> PageResult:
    """Returns the whole fixture list as a single, final page."""
    items = [PluginTranslator.to_domain(raw_item) for raw_item in FIXTURE_PLUGINS]
    return PageResult(items=items, total_count=len(items), has_next_page=False)
