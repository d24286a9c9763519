from dataclasses import dataclass
from enum import Enum


class PriorityType(Enum):
    """Prioritisers able to score a gene against a patient's phenotype."""

    HIPHIVE_PRIORITY = "hiphive"
    PHIVE_PRIORITY = "phive"
    OMIM_PRIORITY = "omim"
    EXOMEWALKER_PRIORITY = "exomewalker"
    NONE = "none"

    @classmethod
    def from_name(cls, name: str) -> "PriorityType":
        """Look a type up by member name or value, ignoring case."""
        normalized = name.strip().lower()
        for priority_type in cls:
            if normalized in (priority_type.name.lower(), priority_type.value):
                return priority_type
        raise ValueError(f"Unknown priority type: {name}")


@dataclass(frozen=True)
class PriorityResult:
    priority_type: PriorityType
    gene_symbol: str
    score: float
