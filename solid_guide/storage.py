"""
Guide storage.

Rendered guides and reports are files named after their topic code, e.g.
``srp.md`` or ``report.json``. The storage works out the file name and the
content type from the topic and the output format, so callers only say
what they are publishing.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .catalog import Topic
from .interfaces import StorageProvider, Logger
from .logging import log_error, log_info

CONTENT_TYPES = {
    "md": "text/markdown",
    "json": "application/json",
}


def guide_key(topic: Union[Topic, str], fmt: str = "md") -> str:
    """File name for a topic's guide in the given format"""
    if fmt not in CONTENT_TYPES:
        raise ValueError(f"Unsupported guide format: {fmt}")
    code = topic.code if isinstance(topic, Topic) else topic
    if not code:
        raise ValueError("Topic code cannot be empty")
    return f"{code.lower()}.{fmt}"


def content_type_for(key: str) -> Optional[str]:
    return CONTENT_TYPES.get(Path(key).suffix.lstrip("."))


class LocalFileStorage(StorageProvider):
    """Writes guides below an output directory"""

    def __init__(self, base_path: str = "output", logger: Optional[Logger] = None):
        self.base_path = Path(base_path)
        self.logger = logger
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.base_path / key

    def _failure(self, key: str, message: str) -> Dict[str, Any]:
        log_error(self.logger, message)
        return {"success": False, "key": key, "error": message}

    def store(self, content: str, key: str, content_type: Optional[str] = None) -> Dict[str, Any]:
        """Write content to key; the content type defaults to one derived from the extension"""
        path = self._path(key)
        data = content.encode("utf-8")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            return self._failure(key, f"Failed to store content at {key}: {e}")

        log_info(self.logger, f"Stored {key} ({len(data)} bytes)")
        return {
            "success": True,
            "key": key,
            "file_path": str(path),
            "content_type": content_type or content_type_for(key),
            "bytes": len(data),
        }

    def store_guide(self, topic: Union[Topic, str], content: str, fmt: str = "md") -> Dict[str, Any]:
        """Store a rendered guide under the topic's file name"""
        key = guide_key(topic, fmt)
        result = self.store(content, key, CONTENT_TYPES[fmt])
        result["topic"] = topic.code if isinstance(topic, Topic) else topic
        return result

    def exists(self, key: str) -> bool:
        return self._path(key).is_file()

    def delete(self, key: str) -> Dict[str, Any]:
        path = self._path(key)
        if not path.is_file():
            return {"success": False, "key": key, "error": "File does not exist"}
        try:
            path.unlink()
        except OSError as e:
            return self._failure(key, f"Failed to delete {key}: {e}")

        log_info(self.logger, f"Deleted {key}")
        return {"success": True, "key": key}

    def list_guides(self) -> List[str]:
        """Keys of every stored guide or report, sorted"""
        return sorted(
            path.name for path in self.base_path.iterdir()
            if path.is_file() and content_type_for(path.name)
        )


class StorageFactory:
    """Factory for creating storage providers"""

    @staticmethod
    def create_local_storage(base_path: str = "output",
                             logger: Optional[Logger] = None) -> LocalFileStorage:
        return LocalFileStorage(base_path, logger)
