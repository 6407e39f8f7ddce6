from abc import ABC, abstractmethod

from sims.models.content_bundle import SiteContentBundle


class ContentProvider(ABC):

    @abstractmethod
    def load(self) -> SiteContentBundle:
        """Build and validate the bundle from this provider's source."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short label for the source, used in log records."""
        pass
