"""Determinism tests for the tax burden engine."""

import dataclasses
import os
import unittest

from core.engine import calculate_tax_burden
from core.models import DEFAULT_INPUTS, TaxInputs


class TaxBurdenEngineDeterminismTests(unittest.TestCase):
    def test_same_input_same_output(self) -> None:
        first = calculate_tax_burden(DEFAULT_INPUTS)
        second = calculate_tax_burden(DEFAULT_INPUTS)

        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())
        self.assertIsNot(first, second)

    def test_household_size_and_state_are_inert(self) -> None:
        baseline = calculate_tax_burden(DEFAULT_INPUTS)
        variants = [
            DEFAULT_INPUTS.replace(household_size=1),
            DEFAULT_INPUTS.replace(household_size=12),
            DEFAULT_INPUTS.replace(state="CA"),
            DEFAULT_INPUTS.replace(state=""),
            DEFAULT_INPUTS.replace(household_size=0, state="TX"),
        ]

        for inputs in variants:
            with self.subTest(inputs=inputs):
                self.assertEqual(calculate_tax_burden(inputs), baseline)

    def test_keyword_order_does_not_change_output(self) -> None:
        inputs_a = TaxInputs(
            gross_income=64000.0,
            household_size=2,
            home_value=210000.0,
            cars_owned=1,
            state="OH",
        )
        inputs_b = TaxInputs(
            state="OH",
            cars_owned=1,
            home_value=210000.0,
            household_size=2,
            gross_income=64000.0,
        )

        self.assertEqual(calculate_tax_burden(inputs_a), calculate_tax_burden(inputs_b))

    def test_inputs_are_replaced_not_mutated(self) -> None:
        updated = DEFAULT_INPUTS.replace(gross_income=90000.0)

        self.assertEqual(DEFAULT_INPUTS.gross_income, 75000.0)
        self.assertEqual(updated.gross_income, 90000.0)
        self.assertEqual(updated.cars_owned, DEFAULT_INPUTS.cars_owned)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_INPUTS.gross_income = 1.0  # type: ignore[misc]

    def test_environment_changes_do_not_affect_output(self) -> None:
        baseline = calculate_tax_burden(DEFAULT_INPUTS).to_dict()
        os.environ["TAX_BURDEN_TEST_ENV"] = "changed"
        self.addCleanup(os.environ.pop, "TAX_BURDEN_TEST_ENV", None)

        after = calculate_tax_burden(DEFAULT_INPUTS).to_dict()

        self.assertEqual(baseline, after)


if __name__ == "__main__":
    unittest.main()
