"""Pydantic models for the unit catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UnitDefinition(BaseModel):
    """A unit and its multiplicative ratio to the category base unit.

    ``offset`` is carried for affine units (temperature) but the engine
    dispatches temperature conversions on ``id`` instead.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    symbol: str
    factor: float = Field(gt=0)
    offset: float = 0.0


class CategoryDefinition(BaseModel):
    """A named group of mutually convertible units."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    base_unit_id: str
    units: tuple[UnitDefinition, ...]

    @model_validator(mode="after")
    def _check_units(self) -> CategoryDefinition:
        if not self.units:
            msg = f"Category {self.name!r} has no units"
            raise ValueError(msg)

        ids = [u.id for u in self.units]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            msg = (
                f"Category {self.name!r} has duplicate unit ids: "
                f"{', '.join(dupes)}"
            )
            raise ValueError(msg)

        if self.base_unit_id not in ids:
            msg = (
                f"Category {self.name!r} base unit "
                f"{self.base_unit_id!r} is not one of its units"
            )
            raise ValueError(msg)
        return self

    def get_unit(self, unit_id: str) -> UnitDefinition | None:
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        return None

    @property
    def base_unit(self) -> UnitDefinition:
        unit = self.get_unit(self.base_unit_id)
        if unit is None:
            msg = (
                f"Category {self.name!r} base unit "
                f"{self.base_unit_id!r} is not one of its units"
            )
            raise LookupError(msg)
        return unit

    @property
    def unit_ids(self) -> tuple[str, ...]:
        return tuple(u.id for u in self.units)
