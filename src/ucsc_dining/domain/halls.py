"""Catalog of UCSC dining halls known to the nutrition site."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class HallInfo:
    """Upstream identity of a dining hall."""

    location_num: int
    location_name: str
    label: str


class DiningHall(Enum):
    """Enum of dining halls (single source of truth for hall identity)."""

    COWELL_STEVENSON = HallInfo(5, "Cowell Stevenson Dining Hall", "Cowell/Stevenson")
    CROWN_MERRILL = HallInfo(20, "Crown Merrill Dining Hall", "Crown/Merrill")
    PORTER_KRESGE = HallInfo(25, "Porter Kresge Dining Hall", "Porter/Kresge")
    RACHEL_CARSON_OAKES = HallInfo(
        30, "Rachel Carson Oakes Dining Hall", "Rachel Carson/Oakes"
    )
    COLLEGES_NINE_TEN = HallInfo(
        40, "Colleges Nine & Ten Dining Hall", "Colleges Nine & Ten"
    )

    @property
    def location_num(self) -> int:
        """Upstream location number."""
        return self.value.location_num

    @property
    def location_name(self) -> str:
        """Display name the upstream expects in requests."""
        return self.value.location_name

    @property
    def label(self) -> str:
        """Short human-readable name."""
        return self.value.label

    @classmethod
    def from_location_num(cls, location_num: int) -> "DiningHall":
        """Return the catalog entry for an upstream location number."""
        for hall in cls:
            if hall.location_num == location_num:
                return hall
        raise ValueError(f"Unknown dining hall location number: {location_num}")
