import codecs

from _scanio.errors import IoError

DEFAULT_CHUNK_SIZE = 8192


class CharStream:
    """
    A text stream decoded lazily from a byte stream as UTF-8. Text streams
    are also accepted, and are then used as is.

    Only as many bytes are pulled from the byte stream as needed to
    answer a read, and bytes are pulled with read1() when available so
    that interactive sources (standard input, sockets) never block
    waiting for a full chunk.

    Positions are counted in code points from the start of the stream.
    It is possible to seek to any position that has been read and not
    yet discarded, which is what the tokenizers use to wind back when a
    token is not found.

    >>> stream = CharStream(io.BytesIO("fóo".encode("utf-8")))
    >>> stream.read(2)
    'fó'
    >>> stream.seek(0)
    >>> stream.read()
    'fóo'
    """

    def __init__(self, byte_stream, chunk_size=DEFAULT_CHUNK_SIZE):
        """
        :param byte_stream: A readable binary stream.
        :param chunk_size: The maximum number of bytes pulled from the
            byte stream at a time.
        """
        self.byte_stream = byte_stream
        self.chunk_size = chunk_size
        self._read_chunk = getattr(byte_stream, "read1", byte_stream.read)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
        self._buffer = ""
        # absolute position of self._buffer[0]
        self._offset = 0
        self._position = 0
        self.at_eof = False
        self._error = None

    def tell(self):
        return self._position

    def seek(self, position):
        if not self._offset <= position <= self._offset + len(self._buffer):
            raise ValueError(
                f"Cannot seek to {position}, "
                f"available positions are {self._offset} "
                f"to {self._offset + len(self._buffer)}"
            )
        self._position = position

    def _decode_chunk(self):
        """
        :returns: The next chunk of decoded text, which may be empty, or
            None if the byte stream was already exhausted.
        :raises IoError: If reading fails, or if the previous chunk ended
            in invalid UTF-8. The stream is then broken and every later
            chunk raises the same error.
        """
        if self._error is not None:
            raise self._error
        if self.at_eof:
            return None
        try:
            chunk = self._read_chunk(self.chunk_size)
            if not chunk:
                self.at_eof = True
                decoded = self._decoder.decode(b"", final=True)
            elif isinstance(chunk, str):
                decoded = chunk
            else:
                decoded = self._decoder.decode(chunk)
        except UnicodeDecodeError as err:
            self._error = IoError(f"Invalid UTF-8 in input: {err}")
            self._error.__cause__ = err
            # the characters before the invalid bytes are still readable
            return err.object[: err.start].decode("utf-8")
        except (OSError, ValueError) as err:
            self._error = IoError(f"Failed to read from input: {err}")
            raise self._error from err
        return decoded

    def fill(self):
        """
        Decode one more chunk from the byte stream into the buffer.

        :returns: False if the byte stream was already exhausted.
        """
        decoded = self._decode_chunk()
        if decoded is None:
            return False
        self._buffer += decoded
        return True

    def fill_all(self):
        parts = [self._buffer]
        try:
            decoded = self._decode_chunk()
            while decoded is not None:
                parts.append(decoded)
                decoded = self._decode_chunk()
        finally:
            self._buffer = "".join(parts)

    def _available(self):
        return self._offset + len(self._buffer) - self._position

    def read(self, size=-1):
        """
        Read at most size characters, or until end of stream if size is
        negative. Returns the empty string only at end of stream.
        """
        if size < 0:
            self.fill_all()
        else:
            while self._available() < size and self.fill():
                pass
        start = self._position - self._offset
        end = len(self._buffer) if size < 0 else start + size
        result = self._buffer[start:end]
        self._position += len(result)
        return result

    def discard(self):
        """
        Drop everything before the current position. After discard it is
        no longer possible to seek to those positions.
        """
        drop = self._position - self._offset
        if drop > 0:
            self._buffer = self._buffer[drop:]
            self._offset = self._position

    def close(self):
        self.byte_stream.close()
