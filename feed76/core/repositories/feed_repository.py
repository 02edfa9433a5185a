"""
JSON feed repository for feed76.

Writes each feed as a pretty-printed JSON file in an output directory
(served as static files, e.g. GitHub Pages).
"""

import json
import os
from typing import Any, Dict, List, Optional

from ..interfaces import FeedRepository
from ...utils import ensure_directory, get_logger

logger = get_logger('feed_repository')


class JsonFeedRepository(FeedRepository):
    """
    File-backed feed storage.

    Each write goes to a temporary file that then replaces the target, so
    readers never see a half-written feed.
    """

    def __init__(self, output_dir: str):
        """
        Initialize the repository.

        Args:
            output_dir: Directory the feed files live in
        """
        self.output_dir = output_dir
        ensure_directory(self.output_dir)

    def path_for(self, name: str) -> str:
        """
        Full path of a feed file.

        Raises:
            ValueError: If name is not a plain .json file name
        """
        if not name or os.path.basename(name) != name or not name.endswith(".json"):
            raise ValueError(f"Invalid feed name: {name!r}")
        return os.path.join(self.output_dir, name)

    async def save(self, name: str, feed: Dict[str, Any]) -> str:
        path = self.path_for(name)
        tmp_path = f"{path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(feed, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except Exception:
            logger.error(f"Failed to write {path}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logger.debug(f"Wrote {path}")
        return path

    async def load(self, name: str) -> Optional[Dict[str, Any]]:
        path = self.path_for(name)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    async def list_feeds(self) -> List[str]:
        if not os.path.isdir(self.output_dir):
            return []
        return sorted(n for n in os.listdir(self.output_dir) if n.endswith(".json"))
