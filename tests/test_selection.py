import unittest

from calc.selection import customer_combinations, filter_items, unique_filter_values
from models import DistributionFilter, LineItem


def _items() -> list[LineItem]:
    rows = [
        (1, "ACME LTD", "BF GOODRICH TYRE 235/85R16", "Tyres", "BF GOODRICH", 1200),
        (2, "ACME LTD", "Valve TR 414J", "Accessories", "ADVANCE", 960),
        (3, "BETA CO", "MICHELIN TYRE 265/65R17", "Tyres", "MICHELIN", 480),
        (4, "BETA CO", "Wheel balance", "TYRE SERVICE", "TYRE SERVICE", 300),
    ]
    return [
        LineItem(id=i, customer=c, item=name, category=cat, brand=brand, budget2026=budget)
        for i, c, name, cat, brand, budget in rows
    ]


class FilterItemsTests(unittest.TestCase):
    def test_empty_filter_matches_all(self) -> None:
        self.assertEqual([item.id for item in filter_items(_items(), DistributionFilter())], [1, 2, 3, 4])

    def test_exact_customer_category_brand(self) -> None:
        filters = DistributionFilter(customer="ACME LTD", category="Tyres")
        self.assertEqual([item.id for item in filter_items(_items(), filters)], [1])

        filters = DistributionFilter(brand="MICHELIN")
        self.assertEqual([item.id for item in filter_items(_items(), filters)], [3])

        filters = DistributionFilter(category="tyres")
        self.assertEqual(filter_items(_items(), filters), [])

    def test_item_name_is_case_insensitive_substring(self) -> None:
        filters = DistributionFilter(item="tyre")
        self.assertEqual([item.id for item in filter_items(_items(), filters)], [1, 3])

    def test_returns_copies(self) -> None:
        items = _items()
        selected = filter_items(items, DistributionFilter(customer="BETA CO"))
        selected[0].monthly_data[0].budget_value = 42
        self.assertEqual(items[2].monthly_data[0].budget_value, 0)


class FilterValueTests(unittest.TestCase):
    def test_unique_values_are_sorted(self) -> None:
        values = unique_filter_values(_items())
        self.assertEqual(values["customers"], ["ACME LTD", "BETA CO"])
        self.assertEqual(values["categories"], ["Accessories", "TYRE SERVICE", "Tyres"])
        self.assertEqual(len(values["item_names"]), 4)

    def test_customer_combinations(self) -> None:
        combos = customer_combinations(_items(), "BETA CO")
        self.assertEqual([combo.id for combo in combos], [3, 4])
        self.assertEqual(combos[0].label, "Tyres - MICHELIN - MICHELIN TYRE 265/65R17")
        self.assertEqual(customer_combinations(_items(), ""), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
