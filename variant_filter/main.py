import argparse
import json
import signal
import sys
from typing import Any, List, Optional, Tuple

from dotenv import load_dotenv

from variant_filter.config.loader import AppConfig
from variant_filter.filters.base import FilterChain, FilterKind
from variant_filter.filters.factory import FilterFactory
from variant_filter.model.gene import Gene
from variant_filter.model.variant import Variant
from variant_filter.runners.base import FilterRunner
from variant_filter.runners.factory import FilterRunnerFactory
from variant_filter.runners.parallel import ParallelFilterRunner
from variant_filter.utils.exceptions import RunCancelledError, VariantFilterError
from variant_filter.utils.logger import Logger
from variant_filter.utils.serializer import Serializer, load_genes


def build_filter_chain(config: AppConfig) -> FilterChain:
    """Create the configured filters, in the configured order."""
    return FilterFactory.create_filter_chain(
        [FilterFactory.create(settings.name, **settings.params) for settings in config.filters]
    )


def filter_genes(
    chain: FilterChain, runner: FilterRunner, genes: List[Gene]
) -> Tuple[List[Gene], List[Variant]]:
    """
    Run gene filters over the genes, then variant filters over their variants.

    Gene filters go first so their results are already on the variants when
    the variant filters run.

    Returns:
        The genes passing the gene filters and the variants passing everything.

    Raises:
        RunCancelledError: If a parallel run is stopped during either phase.
    """
    passed_genes = runner.run(chain.of_kind(FilterKind.GENE), genes)
    if isinstance(runner, ParallelFilterRunner) and runner.stopped:
        # the variant phase would clear the stop signal
        raise RunCancelledError(
            "Filter run stopped after gene filtering", completed=len(genes)
        )
    variants = [variant for gene in genes for variant in gene.variants]
    passed_variants = runner.run(chain.of_kind(FilterKind.VARIANT), variants)
    return passed_genes, passed_variants


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Filter annotated genes and variants through a filter chain"
    )
    parser.add_argument("input", help="JSON file of annotated genes")
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Where to write the report (default: stdout)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the variant-filter application.

    Loads configuration from the environment, reads the annotated genes,
    filters them and writes every record with its filter history as JSON.
    SIGINT and SIGTERM stop a parallel run between batches.
    """
    load_dotenv()
    args = parse_args(argv)

    logger = Logger.get_logger()

    try:
        app_config = AppConfig.load()
        Logger.update_level(app_config.log_level)

        chain = build_filter_chain(app_config)
        runner = FilterRunnerFactory.create(
            app_config.runner_type,
            max_workers=app_config.max_workers,
            batch_size=app_config.batch_size,
        )
        logger.info(
            f"HiPhive organisms: {sorted(o.value for o in app_config.hiphive_options.organisms_to_run)}"
        )

        with open(args.input) as f:
            genes = load_genes(json.load(f))

        previous_handlers = {}
        if isinstance(runner, ParallelFilterRunner):

            def signal_handler(sig: Any, _frame: Any) -> None:
                logger.info("Shutdown signal received")
                runner.stop()

            for signum in (signal.SIGINT, signal.SIGTERM):
                previous_handlers[signum] = signal.signal(signum, signal_handler)

        try:
            passed_genes, passed_variants = filter_genes(chain, runner, genes)
        finally:
            for signum, handler in previous_handlers.items():
                signal.signal(signum, handler)

        logger.info(
            f"{len(passed_genes)} of {len(genes)} genes and {len(passed_variants)} variants passed"
        )

        report = Serializer().to_json(genes)
        if args.output:
            with open(args.output, "w") as f:
                f.write(report)
        else:
            sys.stdout.write(report + "\n")
    except (VariantFilterError, OSError, json.JSONDecodeError) as e:
        logger.error(f"Filtering failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
