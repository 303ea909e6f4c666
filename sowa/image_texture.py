"""RGBA image textures."""

from __future__ import annotations

import io
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .document import Document
from .filesystem import FileSystem
from .ids import LinearIDGenerator
from .resource import Resource

_texture_ids = LinearIDGenerator()


class ImageTexture(Resource):
    """An image held as bottom-up RGBA pixels, loaded through a file system."""

    def __init__(self, fs: Optional[FileSystem] = None, rid: int = 0) -> None:
        super().__init__(rid)
        self.fs = fs
        self._id = 0
        self._width = 0
        self._height = 0
        self._channels = 0
        self._pixels = b""

    @property
    def id(self) -> int:
        """Texture handle; 0 while no image is held."""
        return self._id

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def pixels(self) -> bytes:
        """RGBA bytes, rows ordered from the bottom of the image up."""
        return self._pixels

    def load(self, path: str) -> bool:
        """Load an image file from ``path``.

        Returns False when the file cannot be read; raises ValueError,
        after releasing the current image, when it cannot be decoded.
        """
        if self.fs is None:
            raise RuntimeError("texture has no file system to load from")
        file = self.fs.load(path)
        if file is None:
            return False

        try:
            with Image.open(io.BytesIO(file.data)) as image:
                rgba = image.convert("RGBA").transpose(Image.Transpose.FLIP_TOP_BOTTOM)
                width, height = rgba.size
                data = rgba.tobytes()
        except (UnidentifiedImageError, OSError) as exc:
            self.delete()
            raise ValueError(f"Failed to load texture path: {path}") from exc

        self.filepath = path
        self.load_from_data(data, width, height)
        return True

    def load_from_data(self, data: bytes, width: int, height: int) -> None:
        """Replace the image with ``width`` x ``height`` RGBA pixel data."""
        if width < 0 or height < 0:
            raise ValueError("texture size must not be negative")
        expected = width * height * 4
        if len(data) != expected:
            raise ValueError(f"expected {expected} bytes of RGBA data, got {len(data)}")
        self.delete()
        self._width = width
        self._height = height
        self._channels = 4
        self._pixels = bytes(data)
        self._id = _texture_ids.next()

    def delete(self) -> None:
        """Release the held image."""
        self._id = 0
        self._width = 0
        self._height = 0
        self._channels = 0
        self._pixels = b""

    def load_resource(self, doc: Document) -> None:
        path = doc.get("Path", "")
        if path != "":
            self.load(path)

    def save_resource(self, doc: Document) -> None:
        doc.set("Path", self.filepath)

    def __str__(self) -> str:
        return f"ImageTexture(ID: {self._id}, RID: {self.rid})"