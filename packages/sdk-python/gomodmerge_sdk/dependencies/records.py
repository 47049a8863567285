"""
Module Record Stream Decoding
=============================

``go list -m -json all`` writes one JSON object per module, back to back
(not wrapped in an array). This module turns that stream into a lazy
sequence of validated ModuleRecord objects, decoding incrementally so the
whole output never has to be held in memory at once.
"""

import json
import re
from typing import Any, Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gomodmerge_common.errors import RecordDecodeError

_decoder = json.JSONDecoder()

# A literal or number cut off at the end of the buffer.
_PARTIAL_TOKEN = re.compile(
    r"-?(?:\d+(?:\.\d*)?)?(?:[eE][-+]?\d*)?"
    r"|\.\d*(?:[eE][-+]?\d*)?"
    r"|t(?:r(?:ue?)?)?|f(?:a(?:l(?:se?)?)?)?|n(?:u(?:ll?)?)?"
)


class ModuleRecord(BaseModel):
    """One module entry from the resolver's build list."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: str = Field(alias="Path", min_length=1)
    version: Optional[str] = Field(default=None, alias="Version")
    main: bool = Field(default=False, alias="Main")
    indirect: bool = Field(default=False, alias="Indirect")

    @property
    def has_version(self) -> bool:
        """The main module, and modules the resolver left unversioned, have none."""
        return bool(self.version)


def _skip_whitespace(buffer: str, pos: int) -> int:
    while pos < len(buffer) and buffer[pos].isspace():
        pos += 1
    return pos


def _is_truncated(buffer: str, error: json.JSONDecodeError) -> bool:
    """Whether more input could still turn buffer into a valid value."""
    if error.msg.startswith("Unterminated string"):
        return True
    if error.msg.startswith("Invalid \\uXXXX escape"):
        return len(buffer) - error.pos <= 6
    return _PARTIAL_TOKEN.fullmatch(buffer, error.pos) is not None


def _malformed(index: int, error: json.JSONDecodeError) -> RecordDecodeError:
    return RecordDecodeError(
        f"malformed module record #{index}",
        details=f"{error.msg} at line {error.lineno} column {error.colno}",
    )


def _to_record(obj: Any, index: int) -> ModuleRecord:
    if not isinstance(obj, dict):
        raise RecordDecodeError(
            f"malformed module record #{index}",
            details=f"expected a JSON object, got {type(obj).__name__}",
        )
    try:
        return ModuleRecord.model_validate(obj)
    except ValidationError as e:
        raise RecordDecodeError(
            f"malformed module record #{index}",
            details=str(e).replace("\n", " "),
        ) from e


def iter_module_records(chunks: Iterable[str]) -> Iterator[ModuleRecord]:
    """
    Decode a stream of concatenated JSON objects into module records.

    Args:
        chunks: Text fragments of the resolver's stdout, in order. Chunk
            boundaries may fall anywhere, including inside a record.

    Yields:
        ModuleRecord for each object, in stream order

    Raises:
        RecordDecodeError: On invalid JSON, a truncated trailing record, a
            value that is not an object, or an object without a Path
    """
    buffer = ""
    index = 0

    for chunk in chunks:
        buffer += chunk
        pos = _skip_whitespace(buffer, 0)
        while pos < len(buffer):
            try:
                obj, end = _decoder.raw_decode(buffer, pos)
            except json.JSONDecodeError as e:
                if not _is_truncated(buffer, e):
                    raise _malformed(index + 1, e) from e
                # Incomplete object; wait for more input.
                break
            index += 1
            yield _to_record(obj, index)
            pos = _skip_whitespace(buffer, end)
        buffer = buffer[pos:]

    if buffer:
        # Whatever is left never decoded: a truncated or invalid record.
        try:
            _decoder.raw_decode(buffer)
        except json.JSONDecodeError as e:
            raise _malformed(index + 1, e) from e
