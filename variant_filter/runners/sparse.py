from variant_filter.model.filterable import Filterable
from variant_filter.runners.simple import SimpleFilterRunner


class SparseFilterRunner(SimpleFilterRunner):
    """
    Stops running filters on a record once it has failed one.

    Returns the same records as SimpleFilterRunner, but a failed record's
    history ends at the filter which failed it. Put cheap filters likely to
    remove most records first in the chain.
    """

    strategy = "sparse"

    def should_evaluate(self, record: Filterable) -> bool:
        # the only difference from full filtering
        return record.passed_filters
