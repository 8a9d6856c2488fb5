"""Byte sources and binary record I/O."""

from shape_record.io.byte_source import ByteSource, StreamByteSource, FileByteSource, BufferByteSource
from shape_record.io.record_io import encode_record, write_record, record_size

__all__ = [
    "ByteSource",
    "StreamByteSource",
    "FileByteSource",
    "BufferByteSource",
    "encode_record",
    "write_record",
    "record_size",
]
