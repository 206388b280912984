"""Artist-directory providers.

GroupieAPIProvider pulls the four directory collections over HTTP using the
shared ``fetch_json`` helper.  Swap in another IDirectoryProvider (a fixture
file, a different mirror) without changing the store.
"""

from src.providers.directory.fetch import fetch_json
from src.providers.directory.groupie_api_provider import (
    DEFAULT_BASE_URL,
    DEFAULT_ENDPOINTS,
    GroupieAPIProvider,
)

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_ENDPOINTS", "GroupieAPIProvider", "fetch_json"]
