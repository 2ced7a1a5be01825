"""Tests for breakdown labels, explanations and display formatting."""

import math
import unittest

from core.explanations import BREAKDOWN_LABELS, explain_breakdown, explain_component
from core.formatting import format_currency, format_rate
from core.models import BREAKDOWN_COMPONENTS, DEFAULT_INPUTS


class ExplanationTests(unittest.TestCase):
    def test_every_component_has_label_and_explanation(self) -> None:
        explanations = explain_breakdown(DEFAULT_INPUTS)

        self.assertEqual(tuple(explanations), BREAKDOWN_COMPONENTS)
        self.assertEqual(set(BREAKDOWN_LABELS), set(BREAKDOWN_COMPONENTS))
        for component, text in explanations.items():
            with self.subTest(component=component):
                self.assertTrue(text)
                self.assertEqual(text, explain_component(component, DEFAULT_INPUTS))

    def test_explanations_quote_inputs_and_rates(self) -> None:
        self.assertIn("18%", explain_component("federal_income", DEFAULT_INPUTS))
        self.assertIn("$75,000", explain_component("federal_income", DEFAULT_INPUTS))
        self.assertIn("15.3%", explain_component("fica", DEFAULT_INPUTS))
        self.assertIn("$300,000", explain_component("property_tax", DEFAULT_INPUTS))
        self.assertIn("1.1%", explain_component("property_tax", DEFAULT_INPUTS))
        self.assertIn("$0.55", explain_component("gas_tax", DEFAULT_INPUTS))
        self.assertIn("2 car(s)", explain_component("car_tax", DEFAULT_INPUTS))
        self.assertIn("$2,400", explain_component("utility_tax", DEFAULT_INPUTS))

    def test_explanations_follow_inputs(self) -> None:
        updated = DEFAULT_INPUTS.replace(cars_owned=4)
        self.assertIn("4 car(s)", explain_component("gas_tax", updated))

    def test_unknown_component(self) -> None:
        with self.assertRaises(KeyError):
            explain_component("estate_tax", DEFAULT_INPUTS)


class FormattingTests(unittest.TestCase):
    def test_format_currency(self) -> None:
        self.assertEqual(format_currency(47725.0), "$47,725")
        self.assertEqual(format_currency(550.0000000001), "$550")
        self.assertEqual(format_currency(0.0), "$0")
        self.assertEqual(format_currency(-27275.0), "-$27,275")
        self.assertEqual(format_currency(1234567.8), "$1,234,568")

    def test_format_currency_rounds_half_dollars_away_from_zero(self) -> None:
        self.assertEqual(format_currency(2.5), "$3")
        self.assertEqual(format_currency(4.5), "$5")
        self.assertEqual(format_currency(-2.5), "-$3")
        self.assertEqual(format_currency(-0.4), "$0")

    def test_format_currency_extreme_values(self) -> None:
        self.assertEqual(format_currency(math.inf), "N/A")
        self.assertEqual(format_currency(math.nan), "N/A")
        self.assertTrue(format_currency(1e300).startswith("$1,000,000,"))

    def test_format_rate(self) -> None:
        self.assertEqual(format_rate(63.6333333), "63.6%")
        self.assertEqual(format_rate(0.0), "0.0%")
        self.assertEqual(format_rate(math.nan), "N/A")
        self.assertEqual(format_rate(math.inf), "N/A")


if __name__ == "__main__":
    unittest.main()
