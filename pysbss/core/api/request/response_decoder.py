"""
Response decoder for wrapped JSON payloads.

The CRM may prefix its JSON with whitespace, parentheses or other
characters (a JSONP-like convention). Everything before the first
structural token is discarded and the first JSON value is decoded.
"""
import io
import json
from functools import partial
from typing import Any, BinaryIO, Callable, Iterable, Optional, Tuple, TypeVar

import requests

from ...exceptions import DecodeError, TransportError
from ...logging import get_logger

T = TypeVar('T')

JSON_TOKENS = b'{}[]'
DEFAULT_MAX_PREFIX = 64 * 1024
CHUNK_SIZE = 8192


class ResponseDecoder:
    """
    Decodes the first JSON value of a byte stream.
    
    Leading bytes are skipped until one of ``{ } [ ]`` is found. Escape
    sequences are not interpreted while skipping. At most ``max_prefix``
    bytes are skipped; the scan stops reading once that bound is passed.
    
    Example:
        >>> decoder = ResponseDecoder()
        >>> decoder.decode_bytes(b'({"success":true})')
        {'success': True}
    """
    
    def __init__(self, max_prefix: int = DEFAULT_MAX_PREFIX):
        self.max_prefix = max_prefix
        self._logger = get_logger('pysbss.decoder')
    
    def decode(
        self,
        stream: BinaryIO,
        into: Optional[Callable[[Any], T]] = None
    ) -> Any:
        """
        Decode JSON from stream and close it.
        
        Args:
            stream: Readable binary source (closed on exit)
            into: Optional factory turning the decoded value into a target shape
            
        Returns:
            Decoded value, or ``into(value)``
            
        Raises:
            DecodeError: If no JSON token is found or the JSON is malformed
        """
        try:
            return self.decode_chunks(iter(partial(stream.read, CHUNK_SIZE), b''), into)
        finally:
            stream.close()
    
    def decode_bytes(
        self,
        data: bytes,
        into: Optional[Callable[[Any], T]] = None
    ) -> Any:
        """Decode JSON from a complete body."""
        return self.decode(io.BytesIO(data), into)
    
    def decode_response(
        self,
        response: requests.Response,
        into: Optional[Callable[[Any], T]] = None
    ) -> Any:
        """
        Decode JSON from a streamed ``requests.Response``.
        
        The response is released whatever the outcome.
        
        Raises:
            DecodeError: If the body does not yield a JSON value
            TransportError: If reading the body fails
        """
        try:
            return self.decode_chunks(response.iter_content(CHUNK_SIZE), into)
        except requests.RequestException as e:
            raise TransportError(f"Network error while reading response: {e}") from e
        finally:
            response.close()
    
    def decode_chunks(
        self,
        chunks: Iterable[bytes],
        into: Optional[Callable[[Any], T]] = None
    ) -> Any:
        """Decode JSON from an iterable of byte chunks."""
        body, skipped = self._skip_prefix(iter(chunks))
        if skipped:
            self._logger.debug(f"Skipped {skipped} leading bytes")
        return self._decode_text(body, into)
    
    @staticmethod
    def _find_token(chunk: bytes) -> int:
        positions = [i for i in (chunk.find(t) for t in JSON_TOKENS) if i >= 0]
        return min(positions) if positions else -1
    
    def _skip_prefix(self, chunks) -> Tuple[bytes, int]:
        """Discard bytes up to the first JSON token; returns (rest, count skipped)."""
        skipped = 0
        
        for chunk in chunks:
            index = self._find_token(chunk)
            if index < 0:
                skipped += len(chunk)
            else:
                skipped += index
            if skipped > self.max_prefix:
                raise DecodeError(
                    f"No JSON token within the first {self.max_prefix} bytes"
                )
            if index >= 0:
                return chunk[index:] + b''.join(chunks), skipped
        
        raise DecodeError("Empty or invalid response: no JSON token found")
    
    @staticmethod
    def _decode_text(data: bytes, into: Optional[Callable[[Any], T]]) -> Any:
        try:
            value, _ = json.JSONDecoder().raw_decode(data.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeError(f"Invalid JSON response: {e}") from e
        
        if into is None:
            return value
        
        try:
            return into(value)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Unexpected response shape: {e}") from e
