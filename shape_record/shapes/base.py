"""Base class for shape variants."""

import logging
from abc import ABC, abstractmethod
from typing import Sequence, Union
from shape_record.errors import InsufficientParametersError
from shape_record.render.base import RenderSurface
from shape_record.shapes.kinds import ShapeKind, ShortParamsPolicy

logger = logging.getLogger(__name__)


class Shape(ABC):
    """Abstract interface for a shape variant.
    
    A shape holds no per-record state: it only knows its kind and how to
    turn a flat parameter sequence into render surface calls. Concrete
    subclasses set the class attribute ``KIND``.
    """
    
    KIND: ShapeKind = None
    
    @property
    def kind(self) -> ShapeKind:
        """Return the kind of this shape."""
        return self.KIND
    
    @property
    def required_param_count(self) -> int:
        """Return the number of parameters this shape consumes."""
        return self.KIND.required_param_count
    
    def render(
        self,
        surface: RenderSurface,
        params: Sequence[float],
        policy: Union[ShortParamsPolicy, str] = ShortParamsPolicy.SKIP
    ):
        """Render this shape with the given parameters.
        
        Args:
            surface: Surface receiving the draw calls
            params: Flat parameter sequence
            policy: What to do when params is too short ('skip' or 'error')
            
        Raises:
            InsufficientParametersError: If params is too short and policy is 'error'
        """
        received = len(params)
        if received < self.required_param_count:
            if ShortParamsPolicy(policy) is ShortParamsPolicy.ERROR:
                raise InsufficientParametersError(self.kind, self.required_param_count, received)
            logger.debug(
                "Skipping %s render: %d of %d parameters",
                self.kind.name, received, self.required_param_count
            )
            return
        self._draw(surface, params)
    
    @abstractmethod
    def _draw(self, surface: RenderSurface, params: Sequence[float]):
        """Issue the draw calls. params is guaranteed long enough."""
        pass
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PolygonShape(Shape):
    """Shape drawn as a closed polygon from flat (x, y) vertex pairs."""
    
    @property
    def vertex_count(self) -> int:
        return self.required_param_count // 2
    
    def _draw(self, surface: RenderSurface, params: Sequence[float]):
        surface.polygon(params)
