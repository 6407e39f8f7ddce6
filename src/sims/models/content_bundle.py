from __future__ import annotations

from collections import Counter
from typing import Annotated, Any, List, Tuple
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PositiveInt, StringConstraints, field_validator

from sims.core.exceptions import UnknownSectionError

Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _check_asset_path(value: str) -> str:
    if value.startswith("/") or urlparse(value).scheme:
        raise ValueError(f"asset path must be relative: {value!r}")
    if ".." in value.split("/"):
        raise ValueError(f"asset path must not leave the asset root: {value!r}")
    return value


AssetPath = Annotated[Text, AfterValidator(_check_asset_path)]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NavigationEntry(_FrozenModel):
    id: PositiveInt
    url: Text
    label: Text

    @field_validator("url")
    @classmethod
    def _validate_url(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"navigation url must be a site path starting with '/': {v!r}")
        return v


class Banner(_FrozenModel):
    heading: Text
    description: Text
    tutorial_url: Text
    watch_label: Text

    @field_validator("tutorial_url")
    @classmethod
    def _validate_tutorial_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"tutorial_url must be an absolute http(s) URL: {v!r}")
        return v


class ServiceItem(_FrozenModel):
    label: Text
    description: Text
    image_path: AssetPath


class ServicesSection(_FrozenModel):
    heading: Text
    all_label: Text
    items: Tuple[ServiceItem, ...]


class AboutSection(_FrozenModel):
    """The "why choose us" block; ``reasons`` keep their display order."""

    heading: Text
    title: Text
    image_path: AssetPath
    reasons: Tuple[Text, ...]


class Testimonial(_FrozenModel):
    description: Text
    image_path: AssetPath
    name: Text
    designation: Text


class TestimonialsSection(_FrozenModel):
    heading: Text
    items: Tuple[Testimonial, ...]


class SocialSection(_FrozenModel):
    heading: Text
    icon_paths: Tuple[AssetPath, ...]


class DataEntryLabels(_FrozenModel):
    """Labels of the add-location form. Submission is handled elsewhere."""

    get_location: Text
    goods_unavailable: Text
    crowdedness: Text
    submit: Text
    search_store: Text


class SiteContentBundle(_FrozenModel):
    """Everything the landing page renders, as one read-only value.

    Built once at startup from trusted content (see ``sims.content``) and
    shared by every consumer. Sequences are tuples so the bundle cannot be
    mutated after validation; asset paths stay unresolved strings.
    """

    header: Text
    navigation: Tuple[NavigationEntry, ...] = Field(min_length=1)
    banner: Banner
    services: ServicesSection
    about: AboutSection
    testimonials: TestimonialsSection
    social: SocialSection
    data_entry: DataEntryLabels

    @field_validator("navigation")
    @classmethod
    def _validate_unique_ids(cls, v: Tuple[NavigationEntry, ...]) -> Tuple[NavigationEntry, ...]:
        duplicates = sorted(i for i, n in Counter(e.id for e in v).items() if n > 1)
        if duplicates:
            raise ValueError(f"duplicate navigation ids: {duplicates}")
        return v

    @classmethod
    def section_names(cls) -> List[str]:
        return list(cls.model_fields)

    def section(self, name: str) -> Any:
        if name not in type(self).model_fields:
            raise UnknownSectionError(
                f"Unknown section {name!r}. Valid sections: {', '.join(self.section_names())}"
            )
        return getattr(self, name)

    def navigation_entry(self, entry_id: int) -> NavigationEntry:
        for entry in self.navigation:
            if entry.id == entry_id:
                return entry
        raise UnknownSectionError(f"No navigation entry with id={entry_id!r}")

    def asset_paths(self) -> List[str]:
        """All image references in display order: services, about, testimonials, social."""
        paths = [item.image_path for item in self.services.items]
        paths.append(self.about.image_path)
        paths.extend(item.image_path for item in self.testimonials.items)
        paths.extend(self.social.icon_paths)
        return paths
