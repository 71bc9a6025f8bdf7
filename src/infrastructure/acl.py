import logging
from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import TypeAdapter, ValidationError

from src.domain.exceptions import RegistryError
from src.domain.models import PageResult, PluginSummary

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)

def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""

def _count(value: Any) -> int:
    # Counts that are not non-negative integers display as 0
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)

def _timestamp(value: Any, full_name: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return _DATETIME.validate_python(value)
    except ValidationError:
        logger.warning(f"Unparsable updated_at {value!r} for {full_name}, showing it as unknown.")
        return None

class PluginTranslator:
    """
    Anti-corruption layer that translates raw plugin registry JSON into domain models.
    Missing, null or unparsable fields are defaulted rather than treated as fatal.
    """

    @staticmethod
    def to_domain(raw_item: Dict[str, Any]) -> PluginSummary:
        """
        Transforms a raw registry item into a PluginSummary.

        Args:
            raw_item (Dict[str, Any]): One element of the registry's `items` array.

        Returns:
            PluginSummary: The domain model instance representing the plugin.

        Raises:
            RegistryError: If the item is not an object.
        """
        if not isinstance(raw_item, dict):
            raise RegistryError(f"Malformed plugin entry: expected an object, got {type(raw_item).__name__}.")

        name = _text(raw_item.get('name'))
        owner = _text(raw_item.get('owner'))
        full_name = _text(raw_item.get('full_name')) or f"{owner}/{name}"

        try:
            return PluginSummary(
                full_name=full_name,
                name=name,
                owner=owner,
                description=_text(raw_item.get('description')),
                language=_text(raw_item.get('language')) or None,
                html_url=_text(raw_item.get('html_url')),
                stargazers_count=_count(raw_item.get('stargazers_count')),
                forks_count=_count(raw_item.get('forks_count')),
                updated_at=_timestamp(raw_item.get('updated_at'), full_name),
            )
        except ValidationError as e:
            raise RegistryError(f"Malformed plugin entry '{full_name}': {e}") from e

    @classmethod
    def to_page(cls, raw_body: Any) -> PageResult:
        """
        Transforms a decoded registry response body into a PageResult.

        Args:
            raw_body (Any): The decoded JSON body of the plugin list endpoint.

        Returns:
            PageResult: Items, total count and next-page flag with defaults applied.
        """
        if not isinstance(raw_body, dict):
            raise RegistryError("Malformed registry response: expected a JSON object.")

        raw_items = raw_body.get('items') or []
        if not isinstance(raw_items, list):
            raise RegistryError("Malformed registry response: 'items' is not a list.")

        items = [cls.to_domain(raw_item) for raw_item in raw_items]

        try:
            return PageResult(
                items=items,
                total_count=raw_body.get('total_count') or 0,
                has_next_page=raw_body.get('has_next_page') or False,
            )
        except ValidationError as e:
            raise RegistryError(f"Malformed registry response: {e}") from e
