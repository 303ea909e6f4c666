"""Registry of live resources and of resource types by name."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Type, TypeVar, Union

from .ids import UUIDGenerator
from .resource import Resource

R = TypeVar("R", bound=Resource)

_rid_generator = UUIDGenerator()


class ResourceRegistry:
    def __init__(self) -> None:
        self._resources: Dict[int, Resource] = {}
        self._allocators: Dict[type, Callable[[], Resource]] = {}
        self._typenames: Dict[str, type] = {}
        self._type_ids: Dict[type, str] = {}

    def get_resource(self, rid: int) -> Optional[Resource]:
        return self._resources.get(rid)

    def get_resources(self) -> Dict[int, Resource]:
        return dict(self._resources)

    def add_resource(self, res: Resource, rid: int = 0) -> None:
        """Register ``res``, giving it ``rid`` or a random id if it has none."""
        if rid != 0:
            res.rid = rid
        while res.rid == 0:
            res.rid = _rid_generator.next_i32()
        self._resources[res.rid] = res

    def remove_resource(self, res: Resource) -> None:
        if self._resources.get(res.rid) is res:
            del self._resources[res.rid]

    def remove_resource_by_id(self, rid: int) -> None:
        self._resources.pop(rid, None)

    def add_resource_type(self, cls: Type[Resource], name: str) -> None:
        self._allocators[cls] = cls
        self._typenames[name] = cls
        self._type_ids[cls] = name

    def create_resource(self, type_or_name: Union[str, type]) -> Optional[Resource]:
        """Instantiate a registered type, by class or by name; None if unknown."""
        if isinstance(type_or_name, str):
            cls = self._typenames.get(type_or_name)
            if cls is None:
                return None
            type_or_name = cls
        factory = self._allocators.get(type_or_name)
        return factory() if factory is not None else None

    def new_resource(self, cls: Type[R]) -> Optional[R]:
        res = self.create_resource(cls)
        return res if isinstance(res, cls) else None

    def get_type_name(self, type_id: type) -> str:
        return self._type_ids.get(type_id, "")