"""Tests for Welch's t-test comparison."""

import math

import pytest
from scipy import stats as scipy_stats

from ministat.core.compare import Verdict, compare, welch_degrees_of_freedom
from ministat.core.errors import ErrorKind, InsufficientDegreesOfFreedomError
from ministat.core.stats import Stats, compute_stats
from ministat.core.t_table import confidence_index

CONF_95 = confidence_index("95")


class TestWelchDegreesOfFreedom:
    """Tests for the Welch-Satterthwaite approximation."""

    def test_known_value(self, skewed_stats: Stats, shifted_stats: Stats) -> None:
        # 7.94^2 / (37.2^2 / 100 + 2.5^2 / 100)
        expected = 7.94**2 / (37.2**2 / 100 + 2.5**2 / 100)
        assert welch_degrees_of_freedom(skewed_stats, shifted_stats) == pytest.approx(
            expected
        )

    def test_equal_samples_give_pooled_df(self, narrow_stats: Stats) -> None:
        """Identical variances and sizes give n1 + n2 - 2."""
        assert welch_degrees_of_freedom(narrow_stats, narrow_stats) == pytest.approx(8)


class TestCompare:
    """Tests for compare."""

    def test_no_difference(self, skewed_stats: Stats, narrow_stats: Stats) -> None:
        verdict = compare(narrow_stats, skewed_stats, CONF_95)
        assert not verdict.is_different
        assert verdict.delta is None
        assert verdict.margin is None
        assert verdict.confidence == "95"

    def test_difference(self, skewed_stats: Stats, shifted_stats: Stats) -> None:
        verdict = compare(shifted_stats, skewed_stats, CONF_95)
        assert verdict.is_different
        assert verdict.delta == pytest.approx(10.8)
        assert round(verdict.t_statistic, 4) == 3.8328
        assert verdict.degrees_of_freedom == pytest.approx(4.535, abs=1e-3)
        assert verdict.t_required == pytest.approx(2.776, abs=1e-3)

    def test_margin_and_percentages(
        self, skewed_stats: Stats, shifted_stats: Stats
    ) -> None:
        verdict = compare(shifted_stats, skewed_stats, CONF_95)
        std_error = math.sqrt(37.2 / 5 + 2.5 / 5)
        assert verdict.margin == pytest.approx(verdict.t_required * std_error)
        assert verdict.percent_delta == pytest.approx(10.8 / 6.2 * 100)
        assert verdict.percent_margin == pytest.approx(verdict.margin / 6.2 * 100)

    def test_matches_scipy_welch(self, skewed_sample: list[float]) -> None:
        other = [15.0, 16.5, 17.0, 18.0, 21.0, 22.5]
        verdict = compare(compute_stats(other), compute_stats(skewed_sample), CONF_95)
        expected = scipy_stats.ttest_ind(other, skewed_sample, equal_var=False)
        assert verdict.t_statistic == pytest.approx(abs(expected.statistic))

    def test_symmetric_in_sign_only(
        self, skewed_stats: Stats, shifted_stats: Stats
    ) -> None:
        forward = compare(shifted_stats, skewed_stats, CONF_95)
        backward = compare(skewed_stats, shifted_stats, CONF_95)
        assert forward.t_statistic == pytest.approx(backward.t_statistic)
        assert forward.is_different == backward.is_different
        assert forward.delta == pytest.approx(-backward.delta)

    def test_symmetric_verdict_when_same(
        self, skewed_stats: Stats, narrow_stats: Stats
    ) -> None:
        forward = compare(narrow_stats, skewed_stats, CONF_95)
        backward = compare(skewed_stats, narrow_stats, CONF_95)
        assert forward.t_statistic == pytest.approx(backward.t_statistic)
        assert not forward.is_different
        assert not backward.is_different

    def test_higher_confidence_is_stricter(
        self, skewed_stats: Stats, shifted_stats: Stats
    ) -> None:
        """t = 3.83 with 4 df clears 95% but not 99.5%."""
        assert compare(shifted_stats, skewed_stats, confidence_index("95")).is_different
        assert not compare(
            shifted_stats, skewed_stats, confidence_index("99.5")
        ).is_different

    def test_zero_variance_in_both(self) -> None:
        a = compute_stats([3.0, 3.0, 3.0])
        b = compute_stats([4.0, 4.0, 4.0])
        with pytest.raises(InsufficientDegreesOfFreedomError) as exc_info:
            compare(a, b, CONF_95)
        assert exc_info.value.kind == ErrorKind.INSUFFICIENT_DEGREES_OF_FREEDOM

    def test_zero_variance_in_one(self, narrow_stats: Stats) -> None:
        constant = compute_stats([100.0, 100.0, 100.0])
        verdict = compare(constant, narrow_stats, CONF_95)
        assert verdict.is_different

    def test_zero_reference_mean(self) -> None:
        reference = compute_stats([-1.0, 0.0, 1.0])
        other = compute_stats([50.0, 51.0, 52.0])
        verdict = compare(other, reference, CONF_95)
        assert verdict.is_different
        assert math.isnan(verdict.percent_delta)


class TestVerdict:
    """Tests for the Verdict value object."""

    def test_to_dict_same(self) -> None:
        verdict = Verdict(
            confidence="95", t_statistic=0.5, degrees_of_freedom=8.0, t_required=2.3
        )
        d = verdict.to_dict()
        assert d["verdict"] == "same"
        assert d["delta"] is None

    def test_to_dict_different(
        self, skewed_stats: Stats, shifted_stats: Stats
    ) -> None:
        d = compare(shifted_stats, skewed_stats, CONF_95).to_dict()
        assert d["verdict"] == "different"
        assert d["delta"] == pytest.approx(10.8)
