from typing import Iterator, List, Optional

from catalog.core.settings import settings
from catalog.src.schema.materials import Material


class Archive:
    """Fixed-capacity, ordered collection of materials.

    ``slots`` always holds ``capacity`` entries. The first ``count`` are
    the stored materials in insertion order; every slot past ``count`` is
    ``None``. Use the functions in ``catalog.src.services.archive`` to
    change the contents so that titles stay unique and slots stay packed.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = settings.archive_capacity if capacity is None else capacity
        if self.capacity < 0:
            raise ValueError("Archive capacity cannot be negative")
        self.slots: List[Optional[Material]] = [None] * self.capacity
        self.count = 0

    @property
    def materials(self) -> List[Material]:
        return self.slots[:self.count]

    @property
    def is_full(self) -> bool:
        return self.count >= self.capacity

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Material]:
        return iter(self.slots[:self.count])

    def __repr__(self) -> str:
        return f"Archive(count={self.count}, capacity={self.capacity})"
