import unittest

from pydantic import ValidationError

from models import (
    DistributionFilter,
    DistributionRequest,
    INDUSTRY_PATTERNS,
    LineItem,
    MONTH_CODES,
    MonthlyBudget,
)
from models.seasonal import BUSINESS_ACTIVITY, HOLIDAY_IMPACT


class LineItemTests(unittest.TestCase):
    def test_defaults_to_twelve_empty_months(self) -> None:
        item = LineItem(id=1, customer="ACME", item="Tyre", category="Tyres")
        self.assertEqual([month.month for month in item.monthly_data], list(MONTH_CODES))
        self.assertEqual(item.monthly_budget_total, 0)
        self.assertEqual(item.combination_label, "Tyres -  - Tyre")

    def test_accepts_source_record_shape(self) -> None:
        item = LineItem.model_validate(
            {
                "id": 9,
                "selected": True,
                "customer": "ACME",
                "item": "Valve",
                "category": "Accessories",
                "brand": "ADVANCE",
                "budget2026": 240,
                "monthlyData": [
                    {"month": code.lower(), "budgetValue": 20, "actualValue": 0, "rate": 4, "discount": 0}
                    for code in MONTH_CODES
                ],
            }
        )
        self.assertEqual(item.monthly_budget_total, 240)
        self.assertEqual(item.monthly_data[0].month, "JAN")
        dumped = item.model_dump(by_alias=True)
        self.assertEqual(dumped["monthlyData"][0]["rate"], 4)
        self.assertNotIn("selected", dumped)
        self.assertFalse(hasattr(item, "selected"))

    def test_numeric_month_values(self) -> None:
        item = LineItem(id=1, customer="A", item="B", category="C", monthly_data=list(range(12)))
        self.assertEqual(item.budget_values(), [float(v) for v in range(12)])

    def test_rejects_wrong_month_count_and_negative_budget(self) -> None:
        with self.assertRaises(ValidationError):
            LineItem(id=1, customer="A", item="B", category="C", monthly_data=[1] * 11)
        with self.assertRaises(ValidationError):
            LineItem(id=1, customer="A", item="B", category="C", budget2026=-1)
        with self.assertRaises(ValidationError):
            MonthlyBudget(month="SMARCH")


class DistributionRequestTests(unittest.TestCase):
    def test_defaults(self) -> None:
        request = DistributionRequest()
        self.assertEqual(request.strategy, "seasonal")
        self.assertEqual(request.item_quantity, 0)
        self.assertEqual(request.filters, DistributionFilter())

    def test_filter_none_becomes_empty(self) -> None:
        self.assertEqual(DistributionFilter(customer=None).customer, "")


class SeasonalTableTests(unittest.TestCase):
    def test_tables_cover_every_month_with_positive_values(self) -> None:
        tables = [BUSINESS_ACTIVITY, HOLIDAY_IMPACT, *INDUSTRY_PATTERNS.values()]
        for table in tables:
            self.assertEqual(set(table), set(MONTH_CODES))
            self.assertTrue(all(value > 0 for value in table.values()))
        self.assertEqual(set(INDUSTRY_PATTERNS), {"Tyres", "Accessories", "TYRE SERVICE"})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
