"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the catalog needs:
slug lookup for the uniqueness pre-check and a filtered, windowed
listing that also reports the total match count.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Tuple

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_slug(self, slug: str) -> Optional[Product]:
        """Retrieve the live product holding ``slug``."""

    @abstractmethod
    def find_and_count(
        self,
        filters: Mapping[str, Any],
        skip: int,
        limit: int,
        ordering: Sequence[str],
    ) -> Tuple[List[Product], int]:
        """Return one window of live products and the total match count.

        ``filters`` is a mapping of ORM look-ups (``{"price__gte": 10}``)
        combined with AND.  The count ignores ``skip``/``limit``.
        """
