"""Pydantic schemas for the cabinet cache resolver input."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from challenges.domain.models import AccessLog, CabinetLayout

# Exclusive upper bounds on the input
MAX_CABINET_SIZE = 1024
MAX_NUMBER_OF_CABINETS = 64
MAX_ACCESS_COUNT = 2**32
MAX_ITEM_KEY = 2**32

CabinetSize = Annotated[int, Field(gt=0, lt=MAX_CABINET_SIZE)]
ItemKey = Annotated[int, Field(gt=0, lt=MAX_ITEM_KEY)]
AccessCount = Annotated[int, Field(gt=0, lt=MAX_ACCESS_COUNT)]

_access_count_adapter = TypeAdapter(AccessCount)


def validate_access_count(value: int) -> int:
    """Check K before reading the access lines."""
    return _access_count_adapter.validate_python(value, strict=True)


class CacheRequest(BaseModel):
    """Validated cabinet sizes plus the chronological access sequence."""

    model_config = ConfigDict(strict=True)

    cabinet_sizes: list[CabinetSize] = Field(
        ...,
        min_length=1,
        max_length=MAX_NUMBER_OF_CABINETS - 1,
        description="Cabinet capacities, first cabinet first",
    )
    accesses: list[ItemKey] = Field(
        ...,
        min_length=1,
        description="Item keys in chronological order; the last one is sought",
    )

    def to_layout(self) -> CabinetLayout:
        return CabinetLayout(sizes=list(self.cabinet_sizes))

    def to_access_log(self) -> AccessLog:
        return AccessLog.from_accesses(self.accesses)
