import unittest
from unittest import mock

from calc.distribution import (
    classify_month_factor,
    distribute_by_percentage,
    distribute_equally,
    distribute_seasonally,
    get_seasonal_factors,
    round_half_up,
)


class EqualDistributionTests(unittest.TestCase):
    def test_sum_and_fairness_hold_for_a_range_of_quantities(self) -> None:
        for quantity in list(range(0, 50)) + [119, 120, 121, 1234, 99999]:
            with self.subTest(quantity=quantity):
                distribution = distribute_equally(quantity)
                self.assertEqual(len(distribution), 12)
                self.assertEqual(sum(distribution), quantity)
                self.assertLessEqual(max(distribution) - min(distribution), 1)
                self.assertTrue(all(value >= 0 for value in distribution))

    def test_remainder_goes_to_earliest_months(self) -> None:
        self.assertEqual(distribute_equally(13), [2] + [1] * 11)
        self.assertEqual(distribute_equally(17), [2] * 5 + [1] * 7)

    def test_zero_quantity(self) -> None:
        self.assertEqual(distribute_equally(0), [0] * 12)


class PercentageDistributionTests(unittest.TestCase):
    def test_delegates_to_equal_distribution(self) -> None:
        distribution = distribute_by_percentage(1000, 25)
        self.assertEqual(distribution, distribute_equally(250))
        self.assertEqual(sum(distribution), 250)
        self.assertEqual(distribution, [21] * 10 + [20] * 2)

    def test_half_amounts_round_up(self) -> None:
        # 5 * 50% = 2.5 rounds to 3, not to the even 2.
        self.assertEqual(sum(distribute_by_percentage(5, 50)), 3)
        self.assertEqual(sum(distribute_by_percentage(1, 50)), 1)

    def test_zero_percentage(self) -> None:
        self.assertEqual(distribute_by_percentage(1000, 0), [0] * 12)


class RoundingTests(unittest.TestCase):
    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(2.4999), 2)
        self.assertEqual(round_half_up(-2.5), -2)
        self.assertEqual(round_half_up(-0.4), 0)


class SeasonalFactorTests(unittest.TestCase):
    def test_combined_factors_for_tyres(self) -> None:
        factors = get_seasonal_factors("Tyres")
        self.assertEqual(len(factors), 12)
        self.assertAlmostEqual(factors[3], 1.20 * 0.95 * 1.25)
        self.assertAlmostEqual(factors[3], 1.425)
        self.assertAlmostEqual(factors[9], 1.56)
        self.assertAlmostEqual(factors[11], 0.42)
        self.assertTrue(all(factor > 0 for factor in factors))

    def test_unknown_category_uses_accessories(self) -> None:
        self.assertEqual(get_seasonal_factors("NonexistentCategory"), get_seasonal_factors("Accessories"))
        # Lookup is case sensitive.
        self.assertEqual(get_seasonal_factors("tyres"), get_seasonal_factors("Accessories"))
        self.assertNotEqual(get_seasonal_factors("Tyres"), get_seasonal_factors("Accessories"))

    def test_lookup_is_repeatable(self) -> None:
        first = get_seasonal_factors("TYRE SERVICE")
        first[0] = 99.0
        second = get_seasonal_factors("TYRE SERVICE")
        self.assertEqual(second, get_seasonal_factors("TYRE SERVICE"))
        self.assertNotEqual(second[0], 99.0)

    def test_classify_month_factor(self) -> None:
        factors = get_seasonal_factors("Tyres")
        self.assertEqual(classify_month_factor(factors[3]), "high")
        self.assertEqual(classify_month_factor(factors[9]), "high")
        self.assertEqual(classify_month_factor(factors[11]), "low")
        self.assertEqual(classify_month_factor(factors[10]), "normal")
        self.assertEqual(classify_month_factor(1.1), "normal")
        self.assertEqual(classify_month_factor(0.9), "normal")


class SeasonalDistributionTests(unittest.TestCase):
    def test_tyres_120_sums_exactly(self) -> None:
        distribution = distribute_seasonally(120, "Tyres")
        self.assertEqual(sum(distribution), 120)
        self.assertEqual(distribution, [7, 8, 12, 14, 13, 12, 7, 6, 13, 14, 10, 4])

    def test_peak_months_receive_at_least_december(self) -> None:
        distribution = distribute_seasonally(120, "Tyres")
        self.assertGreaterEqual(distribution[3], distribution[11])
        self.assertGreaterEqual(distribution[9], distribution[11])

    def test_sum_invariant_across_categories(self) -> None:
        for category in ("Tyres", "Accessories", "TYRE SERVICE", "Unknown"):
            for quantity in (1, 7, 12, 50, 120, 365, 1000, 4321):
                with self.subTest(category=category, quantity=quantity):
                    distribution = distribute_seasonally(quantity, category)
                    self.assertEqual(sum(distribution), quantity)
                    self.assertTrue(all(value >= 0 for value in distribution))

    def test_small_quantity_goes_to_highest_factor_month(self) -> None:
        # Every month rounds to zero, so the single unit lands on October.
        self.assertEqual(distribute_seasonally(1, "Tyres"), [0] * 9 + [1, 0, 0])

    def test_zero_quantity(self) -> None:
        for category in ("Tyres", "Accessories", "Other"):
            self.assertEqual(distribute_seasonally(0, category), [0] * 12)

    def test_downward_adjustment_follows_factor_rank(self) -> None:
        with mock.patch("calc.distribution.get_seasonal_factors", return_value=[1.0] * 12):
            # Each month ideally gets 0.5 which rounds up; six units must come back off.
            distribution = distribute_seasonally(6, "Tyres")
        self.assertEqual(distribution, [0] * 6 + [1] * 6)

    def test_unresolved_residue_is_left_after_single_pass(self) -> None:
        # Nothing can be taken from months already at zero, and no second pass runs.
        self.assertEqual(distribute_seasonally(-3, "Tyres"), [0] * 12)

    def test_fractional_residue_is_not_retried(self) -> None:
        with mock.patch("calc.distribution.get_seasonal_factors", return_value=[1.0] * 12):
            distribution = distribute_seasonally(5.5, "Tyres")
        self.assertEqual(distribution, [1] * 6 + [0] * 6)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
