"""
mapper.py

Turns a PUG REST response body into a tagged lookup outcome.

- Single:     root is one compound object (legacy shape), decoded fail-fast.
- Collection: root is {"PC_Compounds": [...]}; undecodable elements are
              skipped and counted, the rest are kept.
- Empty:      nothing usable for this name ("no match").
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Tuple, Union

from pydantic import ValidationError

from .errors import DecodeError
from .models import COMPOUND_KEYS, Compound

COLLECTION_KEY = "PC_Compounds"


@dataclass(frozen=True)
class Single:
    compound: Compound

    @property
    def compounds(self) -> Tuple[Compound, ...]:
        return (self.compound,)


@dataclass(frozen=True)
class Collection:
    compounds: Tuple[Compound, ...]
    skipped: int = 0


@dataclass(frozen=True)
class Empty:
    reason: str
    skipped: int = 0

    @property
    def compounds(self) -> Tuple[Compound, ...]:
        return ()


LookupResult = Union[Single, Collection, Empty]


def load_json(payload: Union[bytes, str, Any]) -> Any:
    """Parse raw bytes/text; anything else is taken as an already-parsed tree."""
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            return json.loads(payload)
        except ValueError as e:
            raise DecodeError(f"response is not valid JSON: {e}") from e
    return payload


def decode_compound(data: Any) -> Compound:
    try:
        return Compound.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"compound record has the wrong shape: {e}") from e


def decode_response(payload: Union[bytes, str, Any]) -> LookupResult:
    data = load_json(payload)

    if not isinstance(data, dict):
        return Empty(f"response root is {type(data).__name__}, not an object")

    if COLLECTION_KEY not in data:
        if COMPOUND_KEYS.intersection(data):
            return Single(decode_compound(data))
        return Empty(f"no {COLLECTION_KEY} in response")

    records = data[COLLECTION_KEY]
    if not isinstance(records, list):
        return Empty(f"{COLLECTION_KEY} is not a list")
    if not records:
        return Empty(f"{COLLECTION_KEY} is empty")

    compounds = []
    skipped = 0
    for record in records:
        try:
            compounds.append(decode_compound(record))
        except DecodeError:
            skipped += 1

    if not compounds:
        return Empty(f"none of the {skipped} compound record(s) could be decoded", skipped=skipped)
    return Collection(tuple(compounds), skipped=skipped)
