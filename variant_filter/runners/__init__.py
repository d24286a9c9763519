from variant_filter.runners.base import FilterRunner, passed_records
from variant_filter.runners.factory import FilterRunnerFactory
from variant_filter.runners.parallel import ParallelFilterRunner
from variant_filter.runners.simple import SimpleFilterRunner
from variant_filter.runners.sparse import SparseFilterRunner

__all__ = [
    "FilterRunner",
    "FilterRunnerFactory",
    "ParallelFilterRunner",
    "SimpleFilterRunner",
    "SparseFilterRunner",
    "passed_records",
]
