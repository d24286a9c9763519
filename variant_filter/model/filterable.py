from typing import List, Set, Tuple

from variant_filter.model.filter_result import FilterResult, FilterType


class Filterable:
    """
    Base class for records that can be run through a filter chain.

    Each record keeps an append-only history of the FilterResults attached to
    it, in the order they were attached. The overall status is cached and
    updated on every attachment: once a FAIL has been recorded the record
    stays failed, whatever is attached afterwards.
    """

    def __init__(self) -> None:
        self._filter_results: List[FilterResult] = []
        self._passed_filters = True

    def add_filter_result(self, filter_result: FilterResult) -> bool:
        """
        Attach a result to this record.

        Args:
            filter_result: The result produced by a filter for this record.

        Returns:
            bool: The record's overall status after the attachment.
        """
        self._filter_results.append(filter_result)
        self._passed_filters = self._passed_filters and filter_result.is_pass()
        return self._passed_filters

    @property
    def passed_filters(self) -> bool:
        """True if every attached result is a PASS, or nothing is attached yet."""
        return self._passed_filters

    @property
    def filter_results(self) -> Tuple[FilterResult, ...]:
        return tuple(self._filter_results)

    @property
    def passed_filter_types(self) -> Set[FilterType]:
        return {result.filter_type for result in self._filter_results if result.is_pass()}

    @property
    def failed_filter_types(self) -> Set[FilterType]:
        return {result.filter_type for result in self._filter_results if result.is_fail()}

    def passed_filter(self, filter_type: FilterType) -> bool:
        # a record may carry the same type twice after a re-run, a single FAIL wins
        return (
            filter_type in self.passed_filter_types
            and filter_type not in self.failed_filter_types
        )

    def failed_filter(self, filter_type: FilterType) -> bool:
        return filter_type in self.failed_filter_types
