from variant_filter.model.filterable import Filterable
from variant_filter.runners.base import FilterRunner


class SimpleFilterRunner(FilterRunner):
    """
    Runs every filter on every record, whether it already failed or not.

    Use this when reports need each record's result for every filter.
    """

    strategy = "full"

    def should_evaluate(self, record: Filterable) -> bool:
        return True
