"""Record pipeline: decode one record, then render it."""

import logging
from typing import Dict, List, Optional, Union
import numpy as np
from shape_record.errors import (
    DecodeError,
    ShapeNotFoundError,
    TruncatedStreamError,
    UnknownKindError,
    UnregisteredKindError,
)
from shape_record.io.byte_source import ByteSource
from shape_record.io import record_io
from shape_record.render.base import RenderSurface
from shape_record.shapes.base import Shape
from shape_record.shapes.kinds import ShapeKind, ShortParamsPolicy
from shape_record.shapes.registry import ShapeRegistry, default_registry

logger = logging.getLogger(__name__)


class RecordPipeline:
    """Decodes a shape record and drives its rendering.

    Shape instances are created through the registry on first use and
    cached per kind for the lifetime of the pipeline. The pipeline starts
    empty and becomes loaded after the first successful decode; a failed
    decode never touches the loaded state.
    """

    def __init__(
        self,
        registry: Optional[ShapeRegistry] = None,
        tag_width: int = 4,
        byte_order: str = "little",
        short_params_policy: Union[ShortParamsPolicy, str] = ShortParamsPolicy.SKIP
    ):
        """Initialize pipeline.

        Args:
            registry: Shape registry (default: all built-in shapes)
            tag_width: Width of the kind tag in bytes
            byte_order: 'little' or 'big'
            short_params_policy: Policy passed to shapes at render time
        """
        self.registry = registry if registry is not None else default_registry()
        self.tag_width = tag_width
        self.byte_order = byte_order
        self.short_params_policy = ShortParamsPolicy(short_params_policy)

        # Validate the wire format up front
        record_io.tag_dtype(tag_width, byte_order)

        self._shapes: Dict[ShapeKind, Shape] = {}
        self._current_kind: Optional[ShapeKind] = None
        self._current_params = np.empty(0, dtype=np.float64)

    @classmethod
    def from_config(cls, config, registry: Optional[ShapeRegistry] = None) -> "RecordPipeline":
        """Build a pipeline from a Config object."""
        return cls(
            registry=registry,
            tag_width=config.tag_width,
            byte_order=config.byte_order,
            short_params_policy=config.short_params_policy,
        )

    @property
    def is_loaded(self) -> bool:
        """True once any decode has succeeded."""
        return self._current_kind is not None

    @property
    def current_kind(self) -> Optional[ShapeKind]:
        return self._current_kind

    @property
    def current_params(self) -> np.ndarray:
        """Copy of the loaded parameters (empty when nothing is loaded)."""
        return self._current_params.copy()

    def cached_kinds(self) -> List[ShapeKind]:
        """Kinds that currently have a cached shape instance."""
        return sorted(self._shapes)

    def _resolve(self, kind: ShapeKind) -> Shape:
        """Return the cached shape for kind, creating it on first use."""
        shape = self._shapes.get(kind)
        if shape is None:
            try:
                shape = self.registry.create(kind)
            except ShapeNotFoundError:
                raise UnregisteredKindError(kind) from None
            self._shapes[kind] = shape
            logger.debug("Cached new %s instance", kind.name)
        return shape

    def decode(self, source: ByteSource):
        """Read one record from source and make it the current record.

        Args:
            source: Byte source positioned at the start of a record

        Raises:
            TruncatedStreamError: If the tag or parameters are cut short
            UnknownKindError: If the tag is not a known shape kind
            UnregisteredKindError: If the kind has no registered constructor
        """
        try:
            raw_tag = source.read(self.tag_width)
        except TruncatedStreamError as exc:
            raise TruncatedStreamError(exc.expected, exc.received, "shape kind tag") from None

        tag = record_io.decode_tag(raw_tag, self.tag_width, self.byte_order)
        try:
            kind = ShapeKind.from_tag(tag)
        except ValueError:
            raise UnknownKindError(tag) from None

        shape = self._resolve(kind)

        count = shape.required_param_count
        try:
            raw_params = source.read(count * record_io.PARAM_SIZE)
        except TruncatedStreamError as exc:
            raise TruncatedStreamError(exc.expected, exc.received, f"{kind.name} parameters") from None
        params = record_io.decode_params(raw_params, count, self.byte_order)
        # Surfaces receive this array directly and must not alter the record
        params.flags.writeable = False

        self._current_kind = kind
        self._current_params = params
        logger.info("Loaded %s record with %d parameters", kind.name, count)

    def try_decode(self, source: ByteSource) -> bool:
        """Like decode(), but log failures and return False instead of raising."""
        try:
            self.decode(source)
        except DecodeError as exc:
            logger.warning("Failed to decode record: %s", exc)
            return False
        return True

    def render(self, surface: RenderSurface):
        """Render the current record on surface; does nothing when empty."""
        if self._current_kind is None:
            logger.debug("Nothing loaded, skipping render")
            return
        shape = self._shapes[self._current_kind]
        shape.render(surface, self._current_params, self.short_params_policy)
