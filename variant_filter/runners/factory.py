from typing import ClassVar, Dict, Type

from variant_filter.runners.base import FilterRunner
from variant_filter.runners.parallel import ParallelFilterRunner
from variant_filter.runners.simple import SimpleFilterRunner
from variant_filter.runners.sparse import SparseFilterRunner
from variant_filter.utils.exceptions import UnsupportedTypeError
from variant_filter.utils.logger import logger


class FilterRunnerFactory:
    """
    Factory for creating FilterRunner implementations.

    Runners are registered by name. Several names may point to the same
    runner, so configuration can say "full" or "exhaustive" for the runner
    which evaluates everything, and "sparse" or "short-circuit" for the one
    which stops at the first failure.
    """

    REGISTRY: ClassVar[Dict[str, Type[FilterRunner]]] = {
        "simple": SimpleFilterRunner,
        "full": SimpleFilterRunner,
        "exhaustive": SimpleFilterRunner,
        "sparse": SparseFilterRunner,
        "short-circuit": SparseFilterRunner,
        "short_circuit": SparseFilterRunner,
    }

    @classmethod
    def register_runner(cls, name: str, runner_class: Type[FilterRunner]) -> None:
        cls.REGISTRY[name.lower()] = runner_class

    @classmethod
    def create(
        cls,
        runner_type: str,
        max_workers: int = 1,
        batch_size: int = 1000,
    ) -> FilterRunner:
        """
        Create a FilterRunner based on requested type.

        Args:
            runner_type (str): The registered name of the runner.
            max_workers (int): Above 1, the runner is wrapped in a ParallelFilterRunner.
            batch_size (int): Records per batch for the parallel runner.

        Returns:
            FilterRunner: An initialized runner.

        Raises:
            UnsupportedTypeError: If the requested runner type is not supported.
        """
        normalized_type = runner_type.strip().lower()
        logger.debug(f"Creating filter runner of type: {normalized_type}")

        if normalized_type not in cls.REGISTRY:
            supported = list(cls.REGISTRY.keys())
            logger.error(
                f"Unsupported filter runner type: {runner_type}. Supported types: {supported}"
            )
            raise UnsupportedTypeError(
                f"Unsupported filter runner type: {runner_type}. Supported types: {supported}"
            )

        runner = cls.REGISTRY[normalized_type]()
        if max_workers > 1:
            return ParallelFilterRunner(runner, batch_size=batch_size, max_workers=max_workers)
        return runner
