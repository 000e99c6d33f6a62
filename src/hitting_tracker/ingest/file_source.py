import json
import logging
from pathlib import Path
from typing import Any

import yaml

from hitting_tracker.ingest.protocols import DataSource

logger = logging.getLogger(__name__)


class JsonSource:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source_type(self) -> str:
        return "json"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self) -> dict[str, Any]:
        logger.debug("Reading JSON export %s", self._path)
        with open(self._path, encoding="utf-8") as f:
            document = json.load(f)
        return _as_document(document, self._path)


class YamlSource:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source_type(self) -> str:
        return "yaml"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self) -> dict[str, Any]:
        logger.debug("Reading YAML export %s", self._path)
        document = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        return _as_document(document, self._path)


def _as_document(document: Any, path: Path) -> dict[str, Any]:
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"{path}: expected a mapping with 'players' and 'outings', got {type(document).__name__}")
    return document


def source_for_path(path: str | Path) -> DataSource:
    """Pick a source by file suffix; anything that is not YAML is read as JSON."""
    suffix = Path(path).suffix.lower()
    if suffix in (".yaml", ".yml"):
        return YamlSource(path)
    return JsonSource(path)
