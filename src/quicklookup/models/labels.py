"""Key-cap label variants.

A cluster is either four text labels laid out on the compass points, or a
special icon cluster. The ``kind`` field is the discriminator, so views
dispatch on the variant type instead of probing for keys.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .enums import SpecialKind


class CardinalLabel(BaseModel):
    """Four text labels on the north/east/south/west keys of a cluster."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cardinal"] = "cardinal"
    north: str = ""
    east: str = ""
    south: str = ""
    west: str = ""

    @classmethod
    def from_row(cls, labels: list[str] | tuple[str, ...]) -> "CardinalLabel":
        """Build from four labels in N, E, S, W order."""
        if len(labels) != 4:
            raise ValueError(f"A cardinal cluster needs 4 labels, got {len(labels)}")
        north, east, south, west = labels
        return cls(north=north, east=east, south=south, west=west)

    @property
    def is_blank(self) -> bool:
        """True when no key in the cluster carries a label."""
        return not any((self.north, self.east, self.south, self.west))

    def as_tuple(self) -> tuple[str, str, str, str]:
        return (self.north, self.east, self.south, self.west)


class SpecialLabel(BaseModel):
    """A cluster rendered as an icon group."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["special"] = "special"
    special: SpecialKind


Label = Annotated[CardinalLabel | SpecialLabel, Field(discriminator="kind")]
