import logging
from typing import List, Optional

from sello_search.catalog import ProductCatalog
from sello_search.config.engine_config import SkuConfig
from sello_search.core.contracts import Suggestion

logger = logging.getLogger(__name__)


class SkuMatcher:
    """
    Direct SKU lookup mode.

    Active when the text starts with a SKU marker ("sku:", "sku "),
    or when the catalog has literal matches for the typed text. While
    active, catalog matches replace all other suggestion lists.
    """

    def __init__(self, config: Optional[SkuConfig] = None):
        self.config = config or SkuConfig()

    def split_marker(self, search_text: Optional[str]):
        """
        Returns (has_marker, query) with the marker removed.
        """
        text = (search_text or "").lstrip()
        lowered = text.lower()
        for marker in self.config.markers:
            if lowered.startswith(marker):
                return True, text[len(marker):].strip()
        return False, text.strip()

    def suggest(self, search_text: Optional[str], catalog=None) -> Optional[List[Suggestion]]:
        """
        SKU suggestions, or None when SKU mode does not apply.

        An explicit marker always enters SKU mode, even with no catalog
        or no matches (the list is then empty).
        """
        has_marker, query = self.split_marker(search_text)
        catalog = ProductCatalog.coerce(catalog)

        if not has_marker:
            if catalog is None or len(query) < self.config.min_query_length:
                return None

        matches = catalog.match(query, limit=self.config.max_results) if catalog is not None else []

        if not matches and not has_marker:
            return None

        logger.debug("SKU mode for %r: %d matches", query, len(matches))

        return [
            Suggestion(
                id=f"sku:{m.sku}",
                label=m.sku,
                kind="sku",
                priority="OPPORTUNITY",
                score=float(m.match_rank),
                description=m.name or None,
                group=m.match_kind,
            )
            for m in matches
        ]
