"""Exception hierarchy for record decoding, registration and rendering."""


class ShapeRecordError(Exception):
    """Base exception for all shape-record errors."""
    pass


class DecodeError(ShapeRecordError):
    """Raised when a record cannot be decoded from a byte source."""
    pass


class TruncatedStreamError(DecodeError):
    """Raised when the source runs out before the required bytes were read."""
    
    def __init__(self, expected: int, received: int, what: str = "bytes"):
        self.expected = expected
        self.received = received
        self.what = what
        super().__init__(f"Truncated stream while reading {what}: expected {expected} bytes, got {received}")


class UnknownKindError(DecodeError):
    """Raised when a tag value is outside the known set of shape kinds."""
    
    def __init__(self, tag: int):
        self.tag = tag
        super().__init__(f"Unknown shape kind tag: {tag}")


class UnregisteredKindError(DecodeError):
    """Raised when a tag names a known kind that has no registered constructor."""
    
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"No constructor registered for shape kind {kind.name}")


class RegistryError(ShapeRecordError):
    """Base exception for shape registry failures."""
    pass


class DuplicateRegistrationError(RegistryError):
    """Raised when a constructor is registered twice for the same kind."""
    
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Shape kind {kind.name} is already registered")


class ShapeNotFoundError(RegistryError, KeyError):
    """Raised when creating a shape whose kind was never registered."""
    
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Shape kind {getattr(kind, 'name', kind)} is not registered")
    
    def __str__(self) -> str:
        return self.args[0]


class InsufficientParametersError(ShapeRecordError, ValueError):
    """Raised when a shape receives fewer parameters than it requires."""
    
    def __init__(self, kind, required: int, received: int):
        self.kind = kind
        self.required = required
        self.received = received
        super().__init__(f"{kind.name} requires {required} parameters, got {received}")
