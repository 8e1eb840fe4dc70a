"""Iteration over paginated esa list endpoints."""

import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Mapping, Optional

logger = logging.getLogger(__name__)


async def paginate(
    fetch_page: Callable[..., Awaitable[Mapping[str, Any]]],
    items_key: str,
    start_page: int = 1,
    max_pages: Optional[int] = None,
    **kwargs: Any,
) -> AsyncIterator[Any]:
    """Iterate through all pages of a paginated endpoint.

    Args:
        fetch_page: Client method accepting a ``page`` keyword, e.g.
            ``client.get_posts``
        items_key: Key of the item list in each page, e.g. ``"posts"``
        start_page: First page to fetch
        max_pages: Stop after this many pages even if more remain
        **kwargs: Passed to every ``fetch_page`` call

    Yields:
        Items from all pages, in order
    """
    page: Optional[int] = start_page
    pages_fetched = 0

    while page is not None:
        if max_pages is not None and pages_fetched >= max_pages:
            break

        result = await fetch_page(page=page, **kwargs)
        pages_fetched += 1

        for item in result.get(items_key) or []:
            yield item

        page = result.get("next_page")
        logger.debug(f"Fetched {items_key} page {pages_fetched}, next page: {page}")
