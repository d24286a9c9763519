from dataclasses import dataclass, field
import os
from typing import Any, Dict, List

from variant_filter.prioritisers.hiphive_options import HiPhiveOptions
from variant_filter.utils.exceptions import ConfigurationError
from variant_filter.utils.logger import logger, resolve_level

# parameters accepted by each filter and whether they are numeric
FILTER_PARAMETERS: Dict[str, Dict[str, bool]] = {
    "quality": {"min_quality": True},
    "frequency": {"max_frequency": True},
    "pathogenicity": {"min_score": True},
    "priority_score": {"priority_type": False, "min_priority_score": True},
}


@dataclass
class FilterSettings:
    """One entry of the configured filter chain."""

    name: str
    params: Dict[str, Any] = field(default_factory=dict)


def parse_filter_settings(text: str) -> List[FilterSettings]:
    """
    Parse a filter chain description.

    Filters are separated by ';' and given in the order they should run. Each
    is a name optionally followed by ':' and comma separated key=value
    parameters, e.g.::

        quality:min_quality=30;priority_score:priority_type=hiphive,min_priority_score=0.5

    Raises:
        ConfigurationError: On unknown filters or parameters, or values which
            are not numbers where a number is expected.
    """
    settings: List[FilterSettings] = []
    for entry in text.split(";"):
        entry = entry.strip()
        if not entry:
            continue
        name, _, raw_params = entry.partition(":")
        name = name.strip().lower()
        if name not in FILTER_PARAMETERS:
            raise ConfigurationError(
                f"Unknown filter '{name}'. Supported filters: {list(FILTER_PARAMETERS)}"
            )
        settings.append(FilterSettings(name, _parse_params(name, raw_params)))
    return settings


def _parse_params(name: str, raw_params: str) -> Dict[str, Any]:
    allowed = FILTER_PARAMETERS[name]
    params: Dict[str, Any] = {}
    for token in raw_params.split(","):
        token = token.strip()
        if not token:
            continue
        key, sep, value = token.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not value:
            raise ConfigurationError(f"Expected key=value for filter '{name}', got '{token}'")
        if key not in allowed:
            raise ConfigurationError(
                f"'{key}' is not a valid parameter for filter '{name}'. "
                f"Valid parameters: {list(allowed)}"
            )
        if allowed[key]:
            try:
                params[key] = float(value)
            except ValueError:
                raise ConfigurationError(
                    f"Parameter '{key}' of filter '{name}' must be a number, got '{value}'"
                )
        else:
            params[key] = value
    return params


@dataclass
class AppConfig(object):
    """
    Application-wide configuration.

    This class represents the configuration for a filtering run: logging
    level, which runner to use and how to batch records, the filter chain and
    the HiPhive prioritiser options.
    """

    log_level: str
    runner_type: str
    batch_size: int
    max_workers: int
    filters: List[FilterSettings]
    hiphive_options: HiPhiveOptions

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Create an AppConfig instance from environment variables.

        Returns:
            AppConfig: Configured instance with values from environment variables
                      or defaults if the environment variables are not set.

        Raises:
            ConfigurationError: If any value is invalid.
        """
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        resolve_level(log_level)
        runner_type = os.getenv("FILTER_RUNNER", "sparse").lower()
        try:
            batch_size = int(os.getenv("BATCH_SIZE", "1000"))
            max_workers = int(os.getenv("MAX_WORKERS", "1"))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}")
        if batch_size < 1 or max_workers < 1:
            raise ConfigurationError("BATCH_SIZE and MAX_WORKERS must be at least 1")

        filters = parse_filter_settings(os.getenv("FILTERS", ""))
        hiphive_options = HiPhiveOptions(
            disease_id=os.getenv("HIPHIVE_DISEASE_ID", ""),
            candidate_gene_symbol=os.getenv("HIPHIVE_CANDIDATE_GENE", ""),
            run_parameters=os.getenv("HIPHIVE_RUN_PARAMS", ""),
        )

        logger.info(
            f"Config: log_level={log_level}, runner={runner_type}, batch_size={batch_size}, "
            f"max_workers={max_workers}, filters={[f.name for f in filters]}"
        )

        return cls(
            log_level=log_level,
            runner_type=runner_type,
            batch_size=batch_size,
            max_workers=max_workers,
            filters=filters,
            hiphive_options=hiphive_options,
        )
