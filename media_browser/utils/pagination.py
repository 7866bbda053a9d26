import math
from typing import Iterable
from urllib.parse import urlencode


def page_url(params: Iterable[tuple[str, str]], page: int) -> str:
    """Return a `?query` string that differs from `params` only in its page value."""
    pairs = []
    replaced = False
    for key, value in params:
        if key == "page":
            if replaced:
                continue
            value = str(page)
            replaced = True
        pairs.append((key, value))
    if not replaced:
        pairs.append(("page", str(page)))
    return f"?{urlencode(pairs)}"


def total_pages_for(total_results: int, page_size: int) -> int:
    """Number of pages implied by the size of the page actually returned."""
    if page_size <= 0:
        return 0
    return math.ceil(total_results / page_size)
