import scanio.version
from _scanio.errors import (
    BadSinkError,
    BadSourceError,
    EndOfInputError,
    IoError,
    ParseError,
)
from _scanio.reading import Reader
from _scanio.source import File, Name, Scanner, Socket, StandardInput, String, Url
from _scanio.tokenizer import DelimiterMode, Tokenizer
from _scanio.writing import StandardOutput, Writer

__author__ = """ScanIO developers"""

__version__ = scanio.version.version

__all__ = [
    "BadSinkError",
    "BadSourceError",
    "DelimiterMode",
    "EndOfInputError",
    "File",
    "IoError",
    "Name",
    "ParseError",
    "Reader",
    "Scanner",
    "Socket",
    "StandardInput",
    "StandardOutput",
    "String",
    "Tokenizer",
    "Url",
    "Writer",
]
