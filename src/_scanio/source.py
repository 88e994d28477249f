"""
Source descriptors and their resolution into readable byte streams.
"""

import importlib.resources
import io
import logging
import os
import socket
import sys
import urllib.request
from dataclasses import dataclass

from _scanio.errors import BadSourceError
from _scanio.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE


@dataclass(frozen=True)
class StandardInput:
    """The standard input of the process."""


@dataclass(frozen=True)
class File:
    """A path to a file, or an already open binary stream."""

    path: object


@dataclass(frozen=True)
class Socket:
    sock: socket.socket


@dataclass(frozen=True)
class Url:
    location: str


@dataclass(frozen=True)
class Name:
    """
    A name which is resolved as a local file, then as a packaged resource,
    then as a url.
    """

    name: str


@dataclass(frozen=True)
class String:
    """In-memory text."""

    text: str


@dataclass(frozen=True)
class Scanner:
    """A tokenizer already in use, shared with its owner."""

    tokenizer: Tokenizer


SOURCE_TYPES = (StandardInput, File, Socket, Url, Name, String, Scanner)


@dataclass
class OpenedSource:
    """
    :ivar stream: A readable binary stream.
    :ivar name: Identifies the source in messages.
    :ivar owned: Whether closing the reader should close the stream.
    """

    stream: object
    name: str
    owned: bool = True


def as_source(obj):
    """
    Convert any object accepted as a source into a source descriptor, ie.
    as_source("data.txt") == Name("data.txt").

    :raises BadSourceError: If obj is None or of no known source type.
    """
    if isinstance(obj, SOURCE_TYPES):
        return obj
    if obj is None:
        raise BadSourceError("Source is None")
    if isinstance(obj, str):
        return Name(obj)
    if isinstance(obj, os.PathLike):
        return File(obj)
    if isinstance(obj, socket.socket):
        return Socket(obj)
    if isinstance(obj, Tokenizer):
        return Scanner(obj)
    if hasattr(obj, "read"):
        return File(obj)
    raise BadSourceError(f"Cannot read from {obj!r}")


def open_file(path, buffer_size=DEFAULT_BUFFER_SIZE):
    try:
        stream = open(path, "rb", buffering=buffer_size)
    except OSError as err:
        raise BadSourceError(f"Could not open {path}: {err}") from err
    logger.debug("Opened file %s", path)
    return OpenedSource(stream, os.fsdecode(path))


def open_stream(stream):
    """
    Use an already open stream. Text streams are read through their binary
    buffer when they have one, so that they are decoded as UTF-8.
    """
    if isinstance(stream, io.TextIOBase) and hasattr(stream, "buffer"):
        stream = stream.buffer
    if getattr(stream, "closed", False):
        raise BadSourceError(f"Stream {stream!r} is closed")
    if hasattr(stream, "readable") and not stream.readable():
        raise BadSourceError(f"Stream {stream!r} is not readable")
    return OpenedSource(stream, str(getattr(stream, "name", "<stream>")))


def open_socket(sock, buffer_size=DEFAULT_BUFFER_SIZE):
    if sock is None:
        raise BadSourceError("Socket is None")
    if sock.fileno() < 0:
        raise BadSourceError(f"Could not open {sock}: socket is closed")
    try:
        stream = sock.makefile("rb", buffering=buffer_size)
    except OSError as err:
        raise BadSourceError(f"Could not open {sock}: {err}") from err
    try:
        peer = sock.getpeername()
    except OSError:
        peer = None
    return OpenedSource(stream, f"socket {peer}" if peer else "<socket>")


def open_url(location, timeout=None):
    """
    Open a url, for instance "https://example.com/data.txt".

    :param timeout: Timeout in seconds for blocking operations, None
        uses the global default socket timeout.
    """
    if location is None:
        raise BadSourceError("Url is None")
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        stream = urllib.request.urlopen(location, **kwargs)
    except (OSError, ValueError) as err:
        raise BadSourceError(f"Could not open {location}: {err}") from err
    logger.debug("Opened url %s", location)
    return OpenedSource(stream, location)


def resource_package(package=None):
    """
    :returns: The package to look up resources in, that is the given
        package or otherwise the package of __main__ (when the program is
        run with "python -m"). None if there is no such package.
    """
    if package is not None:
        return package
    main = sys.modules.get("__main__")
    return getattr(main, "__package__", None) or None


def open_resource(name, package=None):
    """
    :returns: The packaged resource with the given name opened for reading,
        or None if there is no such resource.
    """
    package = resource_package(package)
    if package is None:
        return None
    try:
        resource = importlib.resources.files(package).joinpath(name)
        if not resource.is_file():
            return None
        stream = resource.open("rb")
    except (ImportError, TypeError, ValueError, OSError) as err:
        logger.debug("No resource %s in %s: %s", name, package, err)
        return None
    logger.debug("Opened resource %s in package %s", name, package)
    return OpenedSource(stream, name)


def resolve_name(name, package=None, timeout=None, buffer_size=DEFAULT_BUFFER_SIZE):
    """
    Resolve the name by trying in order: a file relative to the working
    directory, a resource packaged in package and finally a url.
    """
    if name is None:
        raise BadSourceError("Name is None")
    if os.path.exists(name):
        return open_file(name, buffer_size)
    opened = open_resource(name, package)
    if opened is not None:
        return opened
    try:
        return open_url(name, timeout)
    except BadSourceError as err:
        raise BadSourceError(
            f"Could not open {name}: not a file, packaged resource or url"
        ) from err


def resolve(source, package=None, timeout=None, buffer_size=DEFAULT_BUFFER_SIZE):
    """
    Open the byte stream described by the source.

    :param source: Any source accepted by as_source, except Scanner which
        has a tokenizer rather than a byte stream.
    :param package: Package to look up resources in when resolving names.
    :param timeout: Timeout in seconds when opening urls.
    :param buffer_size: Buffer size for opened files and sockets.
    :returns: OpenedSource.
    :raises BadSourceError: If the source could not be opened.
    """
    source = as_source(source)
    if isinstance(source, StandardInput):
        stdin = sys.stdin
        if stdin is None:
            raise BadSourceError("There is no standard input")
        stream = getattr(stdin, "buffer", stdin)
        return OpenedSource(stream, "<stdin>", owned=False)
    if isinstance(source, File):
        if source.path is None:
            raise BadSourceError("File is None")
        if isinstance(source.path, (str, bytes, os.PathLike)):
            return open_file(source.path, buffer_size)
        return open_stream(source.path)
    if isinstance(source, Socket):
        return open_socket(source.sock, buffer_size)
    if isinstance(source, Url):
        return open_url(source.location, timeout)
    if isinstance(source, Name):
        return resolve_name(source.name, package, timeout, buffer_size)
    if isinstance(source, String):
        if not isinstance(source.text, str):
            raise BadSourceError(f"Expected text, got {source.text!r}")
        try:
            encoded = source.text.encode("utf-8")
        except UnicodeEncodeError as err:
            raise BadSourceError(f"Text is not encodable as UTF-8: {err}") from err
        return OpenedSource(io.BytesIO(encoded), "<string>")
    raise BadSourceError(f"{source!r} has no byte stream to open")
