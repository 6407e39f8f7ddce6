"""sims.

SimS - Sicherheit im Supermarkt: content for the landing page.

Navigation, banner, services, testimonials, social icons and the labels of
the add-location form, exposed as one immutable bundle for the rendering
layer to read.
"""

from sims.content.bundle import get_content_bundle
from sims.models.content_bundle import SiteContentBundle

__version__ = "0.1.0"

__all__ = [
    "SiteContentBundle",
    "get_content_bundle",
]
