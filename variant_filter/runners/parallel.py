import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Dict, List, Sequence

from variant_filter.filters.base import FilterLike
from variant_filter.model.filterable import Filterable
from variant_filter.model.gene import Gene
from variant_filter.runners.base import FilterRunner, R, logger, passed_records
from variant_filter.utils.exceptions import (
    ConfigurationError,
    ProcessingError,
    RunCancelledError,
)


class ParallelFilterRunner(FilterRunner):
    """
    Runs a filter chain over batches of records on a thread pool.

    A gene and any of its variants in the same collection are always put in
    the same batch, since the gene's results are copied onto those variants.
    Each batch is handed to the wrapped runner one filter at a time, so every
    record ends up with the same history as running that runner directly,
    and no two workers touch the same record.

    stop() cancels a run between batches: batches which have started finish,
    the rest are skipped and run() raises RunCancelledError. No record is left
    part way through the chain.
    """

    def __init__(self, runner: FilterRunner, batch_size: int = 1000, max_workers: int = 4):
        """
        Args:
            runner: The runner whose evaluation rule is applied to each record.
            batch_size: Number of records handed to a worker at a time.
            max_workers: Size of the thread pool.

        Raises:
            ConfigurationError: If batch_size or max_workers is not positive.
        """
        if batch_size < 1:
            raise ConfigurationError(f"batch_size must be at least 1, got {batch_size}")
        if max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {max_workers}")
        self.runner = runner
        self.batch_size = batch_size
        self.max_workers = max_workers
        self._stop_event = threading.Event()

    @property
    def strategy(self) -> str:  # type: ignore[override]
        return f"parallel {self.runner.strategy}"

    def should_evaluate(self, record: Filterable) -> bool:
        return self.runner.should_evaluate(record)

    def run(self, filters: Sequence[FilterLike], records: Sequence[R]) -> List[R]:
        logger.info(
            f"Filtering {len(records)} records using {self.strategy} filtering "
            f"with {self.max_workers} workers..."
        )

        if self._no_filters_to_run(filters):
            return records  # type: ignore[return-value]

        self._stop_event.clear()
        batches = self._batches(records)
        completed = 0

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="filter_worker"
        ) as executor:
            futures: List[Future] = [
                executor.submit(self._run_batch, filters, batch) for batch in batches
            ]
            for future in futures:
                try:
                    completed += future.result()
                except Exception as e:
                    self._stop_event.set()
                    error_msg = f"Error filtering batch: {str(e)}"
                    logger.error(error_msg)
                    raise ProcessingError(error_msg) from e

        if completed < len(records):
            msg = f"Filter run stopped after {completed} of {len(records)} records"
            logger.warning(msg)
            raise RunCancelledError(msg, completed=completed)

        passed = passed_records(records)
        self._log_summary(filters, records, passed)
        return passed

    def run_filter(self, record_filter: FilterLike, records: Sequence[R]) -> List[R]:
        return self.run([record_filter], records)

    def stop(self) -> None:
        """Signal the current run to stop once the batches in progress complete."""
        if self._stop_event.is_set():
            logger.debug("Stop already in progress, ignoring duplicate call")
            return
        logger.info("Stop signal received")
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    @staticmethod
    def _units(records: Sequence[R]) -> List[List[R]]:
        """Group the records so that a gene shares a unit with its variants in the collection."""
        owner_of: Dict[int, int] = {}
        for record in records:
            if isinstance(record, Gene):
                for variant in record.variants:
                    owner_of[id(variant)] = id(record)

        units: Dict[int, List[R]] = {}
        for record in records:
            units.setdefault(owner_of.get(id(record), id(record)), []).append(record)
        return list(units.values())

    def _batches(self, records: Sequence[R]) -> List[List[R]]:
        # units are never split, so a batch may grow past batch_size by one unit
        batches: List[List[R]] = []
        current: List[R] = []
        for unit in self._units(records):
            current.extend(unit)
            if len(current) >= self.batch_size:
                batches.append(current)
                current = []
        if current:
            batches.append(current)
        return batches

    def _run_batch(self, filters: Sequence[FilterLike], batch: Sequence[Filterable]) -> int:
        if self._stop_event.is_set():
            return 0
        for record_filter in filters:
            self.runner.run_filter(record_filter, batch)
        logger.debug(f"Filtered batch of {len(batch)} records")
        return len(batch)
