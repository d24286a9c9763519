from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TypeVar

from variant_filter.filters.base import FilterKind, FilterLike
from variant_filter.model.filter_result import FilterResult
from variant_filter.model.filterable import Filterable
from variant_filter.model.gene import Gene
from variant_filter.model.variant import Variant
from variant_filter.utils.exceptions import FilterException
from variant_filter.utils.logger import Logger

logger = Logger.get_child("runners")

R = TypeVar("R", bound=Filterable)


def passed_records(records: Sequence[R]) -> List[R]:
    """The records which passed every filter run so far, in their original order."""
    return [record for record in records if record.passed_filters]


class FilterRunner(ABC):
    """
    Base class for applying a chain of filters to a collection of records.

    Filters are applied one at a time, in chain order, across the whole
    collection. Every result is attached to the record it was produced for,
    and results of gene filters are also attached to each variant of the
    gene. Records are never removed from the caller's collection: the runner
    returns the subset that passed, and failed records keep their history for
    reporting.

    Implementations only decide which records are still worth evaluating.
    """

    strategy: str = "full"

    def run(self, filters: Sequence[FilterLike], records: Sequence[R]) -> List[R]:
        """
        Run every filter against the records.

        Args:
            filters: The filters to apply, in order.
            records: The records to filter.

        Returns:
            The records which passed all filters, in their original order. With
            no filters the input collection is returned as is and no record is
            touched.
        """
        logger.info(f"Filtering {len(records)} records using {self.strategy} filtering...")

        if self._no_filters_to_run(filters):
            return records  # type: ignore[return-value]

        for record_filter in filters:
            self._apply_to_all(record_filter, records)

        passed = passed_records(records)
        self._log_summary(filters, records, passed)
        return passed

    def run_filter(self, record_filter: FilterLike, records: Sequence[R]) -> List[R]:
        """Run a single filter against the records and return those passing so far."""
        self._apply_to_all(record_filter, records)
        return passed_records(records)

    def run_record(self, filters: Sequence[FilterLike], record: Filterable) -> bool:
        """
        Run the whole chain against one record.

        Gives the same history as run() would for that record, since filters
        never read other records.

        Returns:
            bool: Whether the record passed.
        """
        for record_filter in filters:
            if self.should_evaluate(record):
                self.apply_filter(record_filter, record)
        return record.passed_filters

    @abstractmethod
    def should_evaluate(self, record: Filterable) -> bool:
        """Whether a record is to be evaluated by the next filter in the chain."""
        pass

    def apply_filter(self, record_filter: FilterLike, record: Filterable) -> Optional[FilterResult]:
        """
        Evaluate one filter on one record and attach the result.

        Variant filters apply to variants and gene filters apply to genes;
        records of the other kind are left untouched and None is returned.
        A filter raising during evaluation fails the record.

        Raises:
            FilterException: If the filter declares a kind the runner does not know.
        """
        kind = record_filter.kind
        if kind is FilterKind.VARIANT:
            if not isinstance(record, Variant):
                return None
            result = self._evaluate(record_filter, record)
            record.add_filter_result(result)
        elif kind is FilterKind.GENE:
            if not isinstance(record, Gene):
                return None
            result = self._evaluate(record_filter, record)
            record.add_filter_result(result)
            for variant in record.variants:
                variant.add_filter_result(result)
        else:
            raise FilterException(f"Unknown filter kind {kind!r} for {record_filter!r}")
        return result

    def _apply_to_all(self, record_filter: FilterLike, records: Sequence[Filterable]) -> None:
        for record in records:
            if self.should_evaluate(record):
                self.apply_filter(record_filter, record)

    @staticmethod
    def _evaluate(record_filter: FilterLike, record: Filterable) -> FilterResult:
        try:
            return record_filter.run_filter(record)
        except Exception as e:
            logger.warning(f"{record_filter!r} could not evaluate {record!r}, failing it: {e}")
            return FilterResult.failed(record_filter.filter_type)

    @staticmethod
    def _no_filters_to_run(filters: Sequence[FilterLike]) -> bool:
        if not filters:
            logger.info("Unable to filter records against empty filter list - returning all records")
            return True
        return False

    @staticmethod
    def _log_summary(
        filters: Sequence[FilterLike],
        records: Sequence[Filterable],
        passed: Sequence[Filterable],
    ) -> None:
        filter_types = sorted({record_filter.filter_type.value for record_filter in filters})
        removed = len(records) - len(passed)
        logger.info(
            f"Filtering for {filter_types} removed {removed} of {len(records)} records "
            f"- returning {len(passed)} filtered records."
        )
