"""
Process-wide access to the site content bundle.

The bundle is built on first use and then shared read-only by every caller;
there is no refresh. Tests call ``reset_content_bundle`` to start over.
Logging setup is left to the host application (or ``sims.cli``).
"""

import threading
from typing import Optional

from sims.config import ContentSettings
from sims.content.providers import provider_from_settings
from sims.core.logger import get_logger, push_content_source, reset_content_source
from sims.models.content_bundle import SiteContentBundle

logger = get_logger(__name__)

_BUNDLE: Optional[SiteContentBundle] = None
_LOCK = threading.Lock()


def get_content_bundle(settings: Optional[ContentSettings] = None) -> SiteContentBundle:
    """
    Return the site content bundle, building it on the first call.

    Args:
        settings: Used only by the call that builds the bundle. Defaults to
                  ``ContentSettings.from_env()``; with no ``SIMS_CONTENT_PATH``
                  set this is the embedded content and cannot fail.

    Returns:
        The same immutable ``SiteContentBundle`` instance on every call.

    Example:
        >>> bundle = get_content_bundle()
        >>> bundle.navigation[0].label
        'Home'
        >>> bundle.data_entry.submit
        'Daten absenden'
    """
    global _BUNDLE
    if _BUNDLE is not None:
        return _BUNDLE

    with _LOCK:
        if _BUNDLE is None:
            settings = settings or ContentSettings.from_env()
            provider = provider_from_settings(settings)
            token = push_content_source(provider.describe())
            try:
                _BUNDLE = provider.load()
                logger.debug("Content bundle ready")
            finally:
                reset_content_source(token)
        elif settings is not None:
            logger.debug("Content bundle already built; ignoring settings")
    return _BUNDLE


def reset_content_bundle() -> None:
    """Drop the cached bundle so the next call rebuilds it."""
    global _BUNDLE
    with _LOCK:
        _BUNDLE = None
