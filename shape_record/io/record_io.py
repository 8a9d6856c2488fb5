"""Binary record encoding and decoding.

A record is a fixed-width unsigned kind tag followed by the kind's
parameters as consecutive float64 values, with no padding or framing.
"""

from pathlib import Path
from typing import Sequence, Union
import numpy as np
from shape_record.errors import InsufficientParametersError
from shape_record.shapes.kinds import ShapeKind

TAG_WIDTHS = (1, 2, 4, 8)
BYTE_ORDERS = {"little": "<", "big": ">"}
PARAM_SIZE = 8


def tag_dtype(tag_width: int = 4, byte_order: str = "little") -> np.dtype:
    """Return the numpy dtype of the kind tag.
    
    Raises:
        ValueError: On an unsupported width or byte order
    """
    if tag_width not in TAG_WIDTHS:
        raise ValueError(f"Unsupported tag width: {tag_width}. Use one of {list(TAG_WIDTHS)}")
    return np.dtype(f"{_order_char(byte_order)}u{tag_width}")


def param_dtype(byte_order: str = "little") -> np.dtype:
    """Return the numpy dtype of a parameter value."""
    return np.dtype(f"{_order_char(byte_order)}f8")


def _order_char(byte_order: str) -> str:
    try:
        return BYTE_ORDERS[byte_order]
    except KeyError:
        raise ValueError(f"Unsupported byte order: {byte_order}. Use 'little' or 'big'") from None


def decode_tag(raw: bytes, tag_width: int = 4, byte_order: str = "little") -> int:
    """Decode a raw tag field to an integer."""
    return int(np.frombuffer(raw, dtype=tag_dtype(tag_width, byte_order), count=1)[0])


def decode_params(raw: bytes, count: int, byte_order: str = "little") -> np.ndarray:
    """Decode count float64 values into a native-order array."""
    values = np.frombuffer(raw, dtype=param_dtype(byte_order), count=count)
    return values.astype(np.float64)


def record_size(kind: ShapeKind, tag_width: int = 4) -> int:
    """Total size in bytes of a record of the given kind."""
    return tag_width + PARAM_SIZE * ShapeKind(kind).required_param_count


def encode_record(
    kind: ShapeKind,
    params: Sequence[float],
    tag_width: int = 4,
    byte_order: str = "little"
) -> bytes:
    """Encode one record.
    
    Args:
        kind: Shape kind
        params: Exactly kind.required_param_count values
        tag_width: Tag width in bytes
        byte_order: 'little' or 'big'
        
    Returns:
        Encoded record bytes
        
    Raises:
        InsufficientParametersError: If the parameter count does not match
    """
    kind = ShapeKind(kind)
    values = np.asarray(params, dtype=np.float64).ravel()
    if values.size != kind.required_param_count:
        raise InsufficientParametersError(kind, kind.required_param_count, values.size)
    
    tag = np.array([int(kind)], dtype=tag_dtype(tag_width, byte_order))
    return tag.tobytes() + values.astype(param_dtype(byte_order)).tobytes()


def write_record(
    output_path: Union[str, Path],
    kind: ShapeKind,
    params: Sequence[float],
    tag_width: int = 4,
    byte_order: str = "little"
):
    """Encode one record and write it to a file, replacing its contents."""
    data = encode_record(kind, params, tag_width=tag_width, byte_order=byte_order)
    with open(output_path, 'wb') as f:
        f.write(data)
