"""
Topic catalog loading.
The catalog holds the prose for each guide and lists topics still to write.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import CatalogError

TOPIC_KINDS = ("principle", "pattern", "interview")
TOPIC_STATUSES = ("done", "todo")


@dataclass
class Topic:
    """One guide page worth of content"""
    code: str
    title: str
    kind: str = "principle"
    status: str = "done"
    definition: str = ""
    why_important: List[str] = field(default_factory=list)
    when_to_use: List[str] = field(default_factory=list)
    checklist: List[str] = field(default_factory=list)

    @property
    def pending(self) -> bool:
        return self.status == "todo"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Topic":
        if not isinstance(data, dict):
            raise CatalogError(f"Topic entry must be a mapping, got {type(data).__name__}")
        missing = [key for key in ("code", "title") if not data.get(key)]
        if missing:
            raise CatalogError(f"Topic entry missing {', '.join(missing)}: {data}")

        kind = data.get("kind", "principle")
        status = data.get("status", "done")
        if kind not in TOPIC_KINDS:
            raise CatalogError(f"Unknown topic kind '{kind}' for {data['code']}")
        if status not in TOPIC_STATUSES:
            raise CatalogError(f"Unknown topic status '{status}' for {data['code']}")

        return cls(
            code=str(data["code"]).upper(),
            title=data["title"],
            kind=kind,
            status=status,
            definition=(data.get("definition") or "").strip(),
            why_important=list(data.get("why_important") or []),
            when_to_use=list(data.get("when_to_use") or []),
            checklist=list(data.get("checklist") or [])
        )


class Catalog:
    """Read-only view over the loaded topics"""

    def __init__(self, topics: List[Topic]):
        self._topics = {topic.code: topic for topic in topics}
        if len(self._topics) != len(topics):
            raise CatalogError("Duplicate topic codes in catalog")

    def get(self, code: str) -> Optional[Topic]:
        return self._topics.get(code.upper())

    def topics(self) -> List[Topic]:
        return list(self._topics.values())

    def principles(self) -> List[Topic]:
        return [topic for topic in self._topics.values() if topic.kind == "principle"]

    def pending(self) -> List[Topic]:
        return [topic for topic in self._topics.values() if topic.pending]

    def __len__(self) -> int:
        return len(self._topics)


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load the YAML topic catalog"""
    catalog_file = Path(path)

    if not catalog_file.exists():
        raise FileNotFoundError(f"Catalog file does not exist: {catalog_file}")

    with open(catalog_file, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog is not valid YAML: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("topics"), list):
        raise CatalogError("Catalog must contain a 'topics' list")

    return Catalog([Topic.from_dict(entry) for entry in data["topics"]])
