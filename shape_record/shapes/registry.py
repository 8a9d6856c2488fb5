"""Shape registry mapping shape kinds to constructors."""

import logging
from typing import Callable, Dict, Iterable, List, Tuple, Type, Union
from shape_record.errors import DuplicateRegistrationError, ShapeNotFoundError
from shape_record.shapes.base import Shape
from shape_record.shapes.circle import Circle
from shape_record.shapes.kinds import ShapeKind
from shape_record.shapes.square import Square
from shape_record.shapes.triangle import Triangle

logger = logging.getLogger(__name__)

ShapeConstructor = Callable[[], Shape]
RegistryEntry = Union[Tuple[ShapeKind, ShapeConstructor], Type[Shape]]


class ShapeRegistry:
    """Maps each shape kind to a zero-argument constructor.

    At most one constructor is held per kind. The registry is populated
    once at startup and only read afterwards.
    """

    def __init__(self):
        self._constructors: Dict[ShapeKind, ShapeConstructor] = {}

    def register(self, kind: ShapeKind, constructor: ShapeConstructor):
        """Register a constructor for a kind.

        Args:
            kind: Shape kind
            constructor: Callable returning a new Shape (usually the class)

        Raises:
            DuplicateRegistrationError: If kind already has a constructor.
                The registry is left unchanged.
        """
        kind = ShapeKind(kind)
        if kind in self._constructors:
            raise DuplicateRegistrationError(kind)
        self._constructors[kind] = constructor

    def register_all(self, entries: Iterable[RegistryEntry]) -> bool:
        """Register several constructors at once.

        Each entry is either a ``(kind, constructor)`` pair or a Shape
        subclass, whose ``KIND`` attribute is used. Entries are applied
        independently: valid, non-colliding ones are committed even when
        others collide or are malformed (no kind, unknown kind, not a pair,
        constructor not callable).

        Args:
            entries: Entries to register

        Returns:
            True if every entry was registered, False otherwise
        """
        collisions: List[ShapeKind] = []
        invalid: List[str] = []
        for entry in entries:
            try:
                kind, constructor = self._unpack_entry(entry)
            except (TypeError, ValueError) as exc:
                invalid.append(f"{entry!r} ({exc})")
                continue
            try:
                self.register(kind, constructor)
            except DuplicateRegistrationError as exc:
                collisions.append(exc.kind)

        if collisions:
            logger.warning(
                "Duplicate shape registrations ignored: %s",
                ", ".join(kind.name for kind in collisions)
            )
        if invalid:
            logger.warning("Invalid shape registrations ignored: %s", "; ".join(invalid))
        return not collisions and not invalid

    @staticmethod
    def _unpack_entry(entry: RegistryEntry) -> Tuple[ShapeKind, ShapeConstructor]:
        """Split a register_all entry into a checked (kind, constructor) pair."""
        if isinstance(entry, type) and issubclass(entry, Shape):
            kind, constructor = entry.KIND, entry
        else:
            kind, constructor = entry
        if kind is None:
            raise ValueError("no shape kind")
        if not callable(constructor):
            raise TypeError("constructor is not callable")
        return ShapeKind(kind), constructor

    def create(self, kind: ShapeKind) -> Shape:
        """Create a new shape instance for a kind.

        Raises:
            ShapeNotFoundError: If no constructor is registered for kind
        """
        constructor = self._constructors.get(kind)
        if constructor is None:
            raise ShapeNotFoundError(kind)
        return constructor()

    def is_registered(self, kind: ShapeKind) -> bool:
        return kind in self._constructors

    def list_registered(self) -> List[ShapeKind]:
        """List registered kinds in tag order."""
        return sorted(self._constructors)

    def __contains__(self, kind) -> bool:
        return self.is_registered(kind)

    def __len__(self) -> int:
        return len(self._constructors)


BUILTIN_SHAPES = (Circle, Triangle, Square)


def default_registry() -> ShapeRegistry:
    """Create a registry with all built-in shapes registered."""
    registry = ShapeRegistry()
    registry.register_all(BUILTIN_SHAPES)
    return registry
