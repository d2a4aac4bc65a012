"""Generation-tagged entity identifiers and the slot table that issues them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, Tuple, Type, TypeVar


@dataclass(frozen=True, order=True)
class EntityId:
    """Slot index plus the generation the slot had when the entity was stored."""

    index: int
    generation: int = 0

    @property
    def key(self) -> str:
        """Compact, variable-name safe rendering of the identifier."""

        return f"{self.index}_{self.generation}"

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.index}, {self.generation})"


@dataclass(frozen=True, order=True)
class PointId(EntityId):
    pass


@dataclass(frozen=True, order=True)
class LineId(EntityId):
    pass


@dataclass(frozen=True, order=True)
class CircleId(EntityId):
    pass


IdT = TypeVar("IdT", bound=EntityId)
T = TypeVar("T")


class _Slot(Generic[T]):
    __slots__ = ("generation", "value")

    def __init__(self, generation: int, value: Optional[T]):
        self.generation = generation
        self.value = value


class Arena(Generic[IdT, T]):
    """Slot table handing out ``(index, generation)`` identifiers.

    Removed slots go to a free list; reusing one bumps its generation so that
    identifiers pointing at the old occupant no longer resolve.
    """

    def __init__(self, id_type: Type[IdT]):
        self._id_type = id_type
        self._slots: List[_Slot[T]] = []
        self._free: List[int] = []
        self._len = 0

    def insert_with(self, factory: Callable[[IdT], T]) -> IdT:
        """Allocate a slot, build the value from its identifier and store it."""

        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
            ident = self._id_type(index, slot.generation)
            slot.value = factory(ident)
        else:
            index = len(self._slots)
            ident = self._id_type(index, 0)
            self._slots.append(_Slot(0, factory(ident)))
        self._len += 1
        return ident

    def _slot_for(self, ident: EntityId) -> Optional[_Slot[T]]:
        if not isinstance(ident, self._id_type):
            return None
        if ident.index < 0 or ident.index >= len(self._slots):
            return None
        slot = self._slots[ident.index]
        if slot.generation != ident.generation or slot.value is None:
            return None
        return slot

    def get(self, ident: EntityId) -> Optional[T]:
        slot = self._slot_for(ident)
        return None if slot is None else slot.value

    def remove(self, ident: EntityId) -> Optional[T]:
        slot = self._slot_for(ident)
        if slot is None:
            return None
        value = slot.value
        slot.value = None
        slot.generation += 1
        self._free.append(ident.index)
        self._len -= 1
        return value

    def __contains__(self, ident: object) -> bool:
        return isinstance(ident, EntityId) and self._slot_for(ident) is not None

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Tuple[IdT, T]]:
        return self.items()

    def items(self) -> Iterator[Tuple[IdT, T]]:
        for index, slot in enumerate(self._slots):
            if slot.value is not None:
                yield self._id_type(index, slot.generation), slot.value


__all__ = ["EntityId", "PointId", "LineId", "CircleId", "Arena"]
