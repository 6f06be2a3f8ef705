import unittest
from decimal import Decimal

from txatlas.core.errors import MalformedAmountError
from txatlas.core.numbers import parse_amount, sum_smallest_units, to_smallest_unit


class SmallestUnitTests(unittest.TestCase):
    def test_fee_scaling_is_exact(self) -> None:
        self.assertEqual(to_smallest_unit("0.010000000", 9), "10000000")

    def test_trailing_zeros_below_exponent_are_fine(self) -> None:
        self.assertEqual(to_smallest_unit("2.000000000", 0), "2")

    def test_large_values_do_not_lose_digits(self) -> None:
        raw = "115792089237316195423570985008687907853269984665640564039457.584007913129639935"
        self.assertEqual(
            to_smallest_unit(raw, 18),
            "115792089237316195423570985008687907853269984665640564039457584007913129639935",
        )

    def test_accepts_decimal_and_int(self) -> None:
        self.assertEqual(to_smallest_unit(Decimal("0.1"), 18), "100000000000000000")
        self.assertEqual(to_smallest_unit(3, 2), "300")

    def test_zero(self) -> None:
        self.assertEqual(to_smallest_unit("0", 9), "0")
        self.assertEqual(to_smallest_unit("0.000", 0), "0")

    def test_too_many_decimals_is_rejected(self) -> None:
        with self.assertRaises(MalformedAmountError):
            to_smallest_unit("0.0000000001", 9)

    def test_rejects_garbage(self) -> None:
        for bad in ("", "  ", "abc", "1,5", "NaN", "Infinity", "-1"):
            with self.subTest(value=bad):
                with self.assertRaises(MalformedAmountError):
                    to_smallest_unit(bad, 9)

    def test_rejects_float(self) -> None:
        with self.assertRaises(MalformedAmountError):
            parse_amount(0.1)

    def test_sum(self) -> None:
        self.assertEqual(sum_smallest_units(["1500000000", "250000000"]), "1750000000")
        self.assertEqual(sum_smallest_units([]), "0")


if __name__ == "__main__":
    unittest.main()
