from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class FilterType(Enum):
    """Identifies the rule family that produced a FilterResult."""

    QUALITY_FILTER = "quality"
    FREQUENCY_FILTER = "frequency"
    PATHOGENICITY_FILTER = "pathogenicity"
    PRIORITY_SCORE_FILTER = "priority-score"


class FilterStatus(Enum):
    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class FilterResult:
    """
    Outcome of applying one filter to one record.

    Instances are immutable and compared by value, so the cached instances
    returned by passed() and failed() can be shared between any number of
    records.
    """

    filter_type: FilterType
    status: FilterStatus

    @classmethod
    def passed(cls, filter_type: FilterType) -> "FilterResult":
        return _cached(filter_type, FilterStatus.PASS)

    @classmethod
    def failed(cls, filter_type: FilterType) -> "FilterResult":
        return _cached(filter_type, FilterStatus.FAIL)

    def is_pass(self) -> bool:
        return self.status is FilterStatus.PASS

    def is_fail(self) -> bool:
        return self.status is FilterStatus.FAIL


_RESULTS: Dict[Tuple[FilterType, FilterStatus], FilterResult] = {
    (filter_type, status): FilterResult(filter_type, status)
    for filter_type in FilterType
    for status in FilterStatus
}


def _cached(filter_type: FilterType, status: FilterStatus) -> FilterResult:
    return _RESULTS[(filter_type, status)]
