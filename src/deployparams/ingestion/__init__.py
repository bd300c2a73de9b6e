"""Input collaborators: filesystem access and JSON decoding."""

from deployparams.ingestion.decoders import (
    decode_compiled_defaults,
    decode_provided_values,
)
from deployparams.ingestion.filesystem import FileSystem, LocalFileSystem

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "decode_compiled_defaults",
    "decode_provided_values",
]
