"""Named sprite-sheet animations stored as a resource."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from .document import Document, decode_ivec2, encode_ivec2
from .resource import Resource

IVec2 = Tuple[int, int]


@dataclass
class SpriteSheet:
    """A texture split into a grid, and the cells played in order."""

    texture: int = 0
    grid_size: IVec2 = (1, 1)
    frames: List[IVec2] = field(default_factory=list)
    speed: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Texture": self.texture,
            "GridSize": encode_ivec2(self.grid_size),
            "Speed": self.speed,
            "Frames": [encode_ivec2(frame) for frame in self.frames],
        }

    @classmethod
    def from_dict(cls, node: Any) -> SpriteSheet:
        """Build from a mapping; missing or malformed fields keep their defaults.

        Raises ValueError when ``node`` is not a mapping.
        """
        if not isinstance(node, dict):
            raise ValueError(f"sprite sheet must be a mapping, got {node!r}")
        sheet = cls()
        doc = Document(node)
        sheet.texture = doc.get("Texture", sheet.texture)
        sheet.speed = doc.get("Speed", sheet.speed)

        grid = node.get("GridSize")
        if grid is not None:
            try:
                sheet.grid_size = decode_ivec2(grid)
            except ValueError:
                pass

        frames = node.get("Frames")
        if isinstance(frames, list):
            try:
                sheet.frames = [decode_ivec2(frame) for frame in frames]
            except ValueError:
                pass
        return sheet


class SpriteSheetAnimation(Resource):
    def __init__(self, rid: int = 0) -> None:
        super().__init__(rid)
        self._animations: Dict[str, SpriteSheet] = {}

    def get_animation(self, name: str) -> Optional[SpriteSheet]:
        return self._animations.get(name)

    def get_animations(self) -> Dict[str, SpriteSheet]:
        """All animations, ordered by name."""
        return dict(sorted(self._animations.items()))

    def set_animation(self, name: str, anim: SpriteSheet) -> None:
        self._animations[name] = replace(anim, frames=list(anim.frames))

    def remove_animation(self, name: str) -> None:
        self._animations.pop(name, None)

    def has_animation(self, name: str) -> bool:
        return name in self._animations

    def load_resource(self, doc: Document) -> None:
        raw = doc.get("Animations", None)
        if not isinstance(raw, dict):
            return
        try:
            loaded = {str(name): SpriteSheet.from_dict(node) for name, node in raw.items()}
        except ValueError:
            return
        self._animations = loaded

    def save_resource(self, doc: Document) -> None:
        doc.set(
            "Animations",
            {name: sheet.to_dict() for name, sheet in self.get_animations().items()},
        )