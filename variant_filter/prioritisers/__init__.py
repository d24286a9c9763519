from variant_filter.prioritisers.hiphive_options import HiPhiveOptions, VALID_RUN_PARAMETERS

__all__ = [
    "HiPhiveOptions",
    "VALID_RUN_PARAMETERS",
]
