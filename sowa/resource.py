"""Base class for engine resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .document import Document


class Resource:
    """A loadable asset identified by a resource id (0 means unassigned)."""

    def __init__(self, rid: int = 0) -> None:
        self.rid = rid
        self.filepath = ""

    @property
    def resource_type(self) -> type:
        return type(self)

    def load_resource(self, doc: Document) -> None:
        """Restore state from a document; the base resource has none."""

    def save_resource(self, doc: Document) -> None:
        """Write state to a document; the base resource has none."""