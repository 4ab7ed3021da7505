"""Image files referenced by items through their image path."""
import logging
import os
from pathlib import Path
from uuid import uuid4

from .errors import MissingField, NotFound

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg")


class ImageStore:
    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, filename):
        name = os.path.basename(filename or "")
        if not name or name in (".", ".."):
            raise MissingField("file name is missing", field="filename")
        return self.directory / name

    def upload(self, filename, data):
        name = os.path.basename(filename or "")
        if not name:
            raise MissingField("file name is missing", field="filename")
        self.directory.mkdir(parents=True, exist_ok=True)
        stored = f"{uuid4().hex}_{name}"
        (self.directory / stored).write_bytes(data)
        logger.info("stored image %s", stored)
        return stored

    def list_images(self):
        if not self.directory.is_dir():
            return []
        return sorted(
            p.name for p in self.directory.iterdir()
            if p.is_file() and p.name.lower().endswith(IMAGE_SUFFIXES)
        )

    def resolve(self, filename):
        path = self._path(filename)
        if not path.is_file():
            logger.error("image not found: %s", path)
            raise NotFound(f"image {filename} not found", filename=filename)
        return path

    def delete(self, filename):
        path = self.resolve(filename)
        path.unlink()
        logger.info("deleted image %s", path.name)
