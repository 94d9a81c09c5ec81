"""
Simple factory for service singletons.

The front-end calls ``ServiceFactory.get_*()`` instead of instantiating
services itself, so tests can swap implementations by replacing the
class-level cache.
"""

from cupcake_order.services.share import ShareService


class ServiceFactory:
    """Lazily creates and caches service instances (class-level singletons)."""

    _share: ShareService | None = None

    @classmethod
    def get_share_service(cls) -> ShareService:
        if cls._share is None:
            cls._share = ShareService()
        return cls._share

    @classmethod
    def reset(cls) -> None:
        cls._share = None
