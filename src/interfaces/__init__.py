"""Public interface definitions for external service providers.

The upstream artist directory is accessed exclusively through
:class:`IDirectoryProvider`.  The concrete HTTP adapter lives in
``src/providers/directory/`` and is instantiated in ``src/main.py`` during
application startup.

    Interface             →  Concrete implementation
    ─────────────────────────────────────────────────
    IDirectoryProvider    →  GroupieAPIProvider
"""

from src.interfaces.directory_provider import IDirectoryProvider

__all__ = ["IDirectoryProvider"]
