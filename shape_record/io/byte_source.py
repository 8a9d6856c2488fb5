"""Byte sources the record decoder reads from."""

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional, Union
from shape_record.errors import TruncatedStreamError


class ByteSource(ABC):
    """Abstract source of raw bytes.
    
    Sources can be used as context managers; leaving the block closes
    the source on every exit path.
    """
    
    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read exactly size bytes.
        
        Args:
            size: Number of bytes to read
            
        Returns:
            The bytes read (always of length size)
            
        Raises:
            TruncatedStreamError: If fewer than size bytes are available
        """
        pass
    
    def close(self):
        """Release the underlying resource."""
        pass
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


class StreamByteSource(ByteSource):
    """Reads from a binary file-like object."""
    
    def __init__(self, stream: BinaryIO, owns_stream: bool = False):
        """Initialize stream source.
        
        Args:
            stream: Binary stream opened for reading
            owns_stream: If True, close() also closes the stream
        """
        self.stream: Optional[BinaryIO] = stream
        self.owns_stream = owns_stream
    
    @property
    def closed(self) -> bool:
        return self.stream is None
    
    def read(self, size: int) -> bytes:
        if self.stream is None:
            raise ValueError("Read from closed byte source")
        
        # Pipes and sockets may return fewer bytes than asked for
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self.stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        
        data = b"".join(chunks)
        if len(data) != size:
            raise TruncatedStreamError(size, len(data))
        return data
    
    def close(self):
        if self.stream is not None:
            if self.owns_stream:
                self.stream.close()
            self.stream = None


class FileByteSource(StreamByteSource):
    """Reads from a file opened at construction time."""
    
    def __init__(self, path: Union[str, Path]):
        """Open a file for reading.
        
        Args:
            path: File path
            
        Raises:
            OSError: If the file cannot be opened
        """
        self.path = Path(path)
        super().__init__(open(self.path, 'rb'), owns_stream=True)


class BufferByteSource(StreamByteSource):
    """Reads from an in-memory bytes buffer."""
    
    def __init__(self, data: bytes):
        super().__init__(io.BytesIO(bytes(data)), owns_stream=True)
