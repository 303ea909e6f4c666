"""Project-wide settings stored as YAML in ``res://project.sowa``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, MutableMapping

import yaml

from . import debug
from .document import Document
from .filesystem import FileSystem, SaveableFileServer

PROJECT_FILE = "res://project.sowa"


@dataclass
class Size:
    width: int = 1280
    height: int = 720


@dataclass
class RenderingSettings:
    window: Size = field(default_factory=Size)
    viewport: Size = field(default_factory=Size)


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    if not all(isinstance(item, str) for item in value.values()):
        return {}
    return {str(key): item for key, item in value.items()}


@dataclass
class ProjectSettings:
    name: str = ""
    author: str = ""
    rendering: RenderingSettings = field(default_factory=RenderingSettings)

    def load(self, fs: FileSystem, store: MutableMapping[str, str]) -> None:
        """Read the project file; fields it lacks keep their current values.

        Entries of its global store are copied into ``store``. Raises
        ValueError or a YAML error when the file is not a YAML mapping.
        """
        file = fs.load(PROJECT_FILE)
        if file is None or file.size() == 0:
            return

        text = file.data.decode("utf-8")
        node = yaml.load(text, Loader=yaml.BaseLoader)
        if node is None:
            node = {}
        if not isinstance(node, dict):
            raise ValueError("project settings must be a YAML mapping")
        doc = Document(node)

        self.name = doc.get("Name", self.name)
        self.author = doc.get("Author", self.author)

        if "Rendering" in doc:
            rendering = doc.get_document("Rendering")
            window = rendering.get_document("Window")
            self.rendering.window.width = window.get("Width", self.rendering.window.width)
            self.rendering.window.height = window.get("Height", self.rendering.window.height)
            viewport = rendering.get_document("Viewport")
            self.rendering.viewport.width = viewport.get("Width", self.rendering.viewport.width)
            self.rendering.viewport.height = viewport.get(
                "Height", self.rendering.viewport.height
            )

        for key, value in _string_map(node.get("GlobalStore")).items():
            store[key] = value

    def _to_dict(self, store: MutableMapping[str, str]) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Author": self.author,
            "Rendering": {
                "Window": {
                    "Width": self.rendering.window.width,
                    "Height": self.rendering.window.height,
                },
                "Viewport": {
                    "Width": self.rendering.viewport.width,
                    "Height": self.rendering.viewport.height,
                },
            },
            "GlobalStore": dict(store),
        }

    def save(self, fs: FileSystem, store: MutableMapping[str, str]) -> bool:
        """Write the settings and ``store`` to the project file; True on success."""
        text = yaml.safe_dump(self._to_dict(store), sort_keys=False)

        server = fs.get_file_server("res")
        if not isinstance(server, SaveableFileServer):
            debug.error("Failed to save scene: folder fs not found")
            return False

        try:
            with server.open_save_stream(PROJECT_FILE) as out:
                out.write(text)
        except OSError:
            debug.error("Failed to save project settings")
            return False

        debug.info("Project saved")
        return True