from unittest.mock import MagicMock

import pytest

from variant_filter.filters.base import Filter, FilterKind
from variant_filter.filters.priority_score import PriorityScoreFilter
from variant_filter.filters.variant_filters import FrequencyFilter, QualityFilter
from variant_filter.model.filter_result import FilterResult, FilterType
from variant_filter.model.gene import Gene
from variant_filter.model.priority import PriorityResult, PriorityType
from variant_filter.model.variant import Variant
from variant_filter.runners.simple import SimpleFilterRunner
from variant_filter.runners.sparse import SparseFilterRunner


class TestSparseFilterRunner:
    """Test cases for the short-circuiting SparseFilterRunner"""

    @pytest.fixture
    def runner(self):
        """Fixture to provide a SparseFilterRunner."""
        return SparseFilterRunner()

    def test_empty_filter_list_returns_input_unchanged(self, runner):
        """Test that an empty chain passes every record without touching it."""
        genes = [Gene("GENEA"), Gene("GENEB")]

        result = runner.run([], genes)

        assert result is genes
        assert all(gene.filter_results == () for gene in genes)

    def test_failed_record_skips_later_filters(self, runner):
        """Test that a record failing the first filter is not run through the second."""
        record = Variant("1", 1, "A", "T", quality=10.0, frequency=0.0)

        passed = runner.run([QualityFilter(30), FrequencyFilter(1.0)], [record])

        assert passed == []
        assert record.filter_results == (FilterResult.failed(FilterType.QUALITY_FILTER),)

    def test_exhaustive_runner_records_both_results(self):
        """Test the same input through the full runner gets both results."""
        record = Variant("1", 1, "A", "T", quality=10.0, frequency=0.0)

        SimpleFilterRunner().run([QualityFilter(30), FrequencyFilter(1.0)], [record])

        assert record.filter_results == (
            FilterResult.failed(FilterType.QUALITY_FILTER),
            FilterResult.passed(FilterType.FREQUENCY_FILTER),
        )

    def test_later_filter_not_called_for_failed_record(self, runner):
        """Test that the second filter is never evaluated on a failed record."""
        second = MagicMock(spec=Filter)
        second.kind = FilterKind.VARIANT
        second.filter_type = FilterType.FREQUENCY_FILTER
        second.run_filter.return_value = FilterResult.passed(FilterType.FREQUENCY_FILTER)
        failing = Variant("1", 1, "A", "T", quality=10.0)
        passing = Variant("1", 2, "A", "T", quality=50.0)

        passed = runner.run([QualityFilter(30), second], [failing, passing])

        assert passed == [passing]
        second.run_filter.assert_called_once_with(passing)

    def test_passing_records_get_every_filter(self, runner):
        """Test that records which keep passing see the whole chain."""
        record = Variant("1", 1, "A", "T", quality=50.0, frequency=0.1)

        passed = runner.run([QualityFilter(30), FrequencyFilter(1.0)], [record])

        assert passed == [record]
        assert len(record.filter_results) == 2

    def test_failed_gene_skips_later_gene_filters(self, runner):
        """Test that a failed gene and its variants stop receiving gene results."""
        variant = Variant("1", 1, "A", "T")
        gene = Gene("GENEB", variants=[variant])
        gene.add_priority_result(PriorityResult(PriorityType.HIPHIVE_PRIORITY, "GENEB", 0.3))
        gene.add_priority_result(PriorityResult(PriorityType.OMIM_PRIORITY, "GENEB", 1.0))
        chain = [
            PriorityScoreFilter(PriorityType.HIPHIVE_PRIORITY, 0.5),
            PriorityScoreFilter(PriorityType.OMIM_PRIORITY, 0.5),
        ]

        runner.run(chain, [gene])

        fail = FilterResult.failed(FilterType.PRIORITY_SCORE_FILTER)
        assert gene.filter_results == (fail,)
        assert variant.filter_results == (fail,)

    def test_variants_failed_by_gene_are_skipped(self, runner):
        """Test that variants already failed by their gene are not evaluated again."""
        variant = Variant("1", 1, "A", "T", quality=50.0)
        gene = Gene("GENEC", variants=[variant])

        runner.run([PriorityScoreFilter(PriorityType.HIPHIVE_PRIORITY, 0.5)], [gene])
        passed = runner.run([QualityFilter(30)], gene.variants)

        assert passed == []
        assert variant.filter_results == (FilterResult.failed(FilterType.PRIORITY_SCORE_FILTER),)
