import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from sims.config import ContentSettings
from sims.content.data import SITE_CONTENT
from sims.core.content_provider import ContentProvider
from sims.core.exceptions import ContentFormatError, ContentSourceNotFoundError, ContentValidationError
from sims.core.logger import get_logger, push_content_source, reset_content_source
from sims.models.content_bundle import SiteContentBundle

logger = get_logger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def _validation_details(exc: ValidationError) -> Dict[str, str]:
    return {".".join(str(p) for p in err["loc"]) or "<root>": err["msg"] for err in exc.errors()}


def _validate(data: Mapping[str, Any], source: str) -> SiteContentBundle:
    try:
        return SiteContentBundle.model_validate(data)
    except ValidationError as e:
        details = _validation_details(e)
        logger.error(f"Content from {source} failed validation: {details}")
        raise ContentValidationError(reason=f"Invalid content in {source}", details=details) from e


class StaticContentProvider(ContentProvider):
    """Validates the embedded content (``SITE_CONTENT`` unless another mapping is given)."""

    def __init__(self, content: Optional[Mapping[str, Any]] = None):
        self.content = SITE_CONTENT if content is None else content

    def describe(self) -> str:
        return "static"

    def load(self) -> SiteContentBundle:
        token = push_content_source(self.describe())
        try:
            bundle = _validate(self.content, self.describe())
            logger.debug(f"Loaded bundle with {len(bundle.navigation)} navigation entries")
            return bundle
        finally:
            reset_content_source(token)


class FileContentProvider(ContentProvider):
    """Reads the bundle from a JSON or YAML file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def describe(self) -> str:
        return str(self.path)

    def _load_file(self) -> Any:
        if not self.path.is_file():
            logger.error(f"Content file not found: {self.path}")
            raise ContentSourceNotFoundError(f"Content file not found: {self.path}")

        suffix = self.path.suffix.lower()
        if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
            raise ContentFormatError(
                f"Unsupported content format: {self.path.suffix!r}. Use .json, .yaml or .yml"
            )

        with open(self.path, "r", encoding="utf-8") as f:
            try:
                if suffix in JSON_SUFFIXES:
                    return json.load(f)
                return yaml.safe_load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                logger.error(f"Could not parse {self.path}: {e}")
                raise ContentFormatError(f"Could not parse content file {self.path}: {e}") from e

    def load(self) -> SiteContentBundle:
        token = push_content_source(self.describe())
        try:
            data = self._load_file()
            if not isinstance(data, dict):
                raise ContentFormatError(
                    f"Content file {self.path} must contain a mapping at the top level, "
                    f"got {type(data).__name__}"
                )
            bundle = _validate(data, self.describe())
            logger.debug(f"Loaded content from {self.path}")
            return bundle
        finally:
            reset_content_source(token)


def provider_from_settings(settings: ContentSettings) -> ContentProvider:
    if settings.content_path is not None:
        return FileContentProvider(settings.content_path)
    return StaticContentProvider()


def dump_bundle(bundle: SiteContentBundle, path: Union[str, Path]) -> Path:
    """Write ``bundle`` to a .json/.yaml/.yml file readable by ``FileContentProvider``."""
    path = Path(path).expanduser()
    suffix = path.suffix.lower()
    data = bundle.model_dump(mode="json")

    if suffix in JSON_SUFFIXES:
        text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    elif suffix in YAML_SUFFIXES:
        text = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    else:
        raise ContentFormatError(f"Unsupported content format: {path.suffix!r}. Use .json, .yaml or .yml")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Wrote content to {path}")
    return path
