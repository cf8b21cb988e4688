"""
Catalog package for the portfolio gallery.

The engine lives in ``store`` (collections and persistence), ``filters``
(search and tag filtering) and ``tags`` (tag normalization and
vocabulary). ``router`` exposes the engine over HTTP so that any
front-end can drive it with plain requests.
"""

from .router import router as catalog_router  # noqa: F401
from .store import CatalogStore, create_store  # noqa: F401
