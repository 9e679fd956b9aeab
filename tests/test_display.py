"""
Tests for text and rich rendering of quantities.
"""

import io
import unittest
from fractions import Fraction

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dimkit.unit import Quantity, as_text, degF, m, s, μm


class TestStringForms(unittest.TestCase):
    """Test str and repr of quantities and units."""

    def test_str(self):
        """Test the human readable form."""
        self.assertEqual(str(3 * m), "3 m")
        self.assertEqual(str((3 * m) / (2 * s)), "1.5 m s^-1")
        self.assertEqual(str(Quantity(7)), "7")

    def test_repr(self):
        """Test the debugging form."""
        self.assertEqual(repr(Fraction(127, 50) * m), "Quantity(127/50, m)")
        self.assertEqual(repr(9 * μm / (m * degF)), "Quantity(9, μm m^-1 °F^-1)")


class TestRichText(unittest.TestCase):
    """Test rich Text rendering."""

    def test_quantity_text(self):
        """Test that magnitude and unit are styled separately."""
        text = as_text(3 * m)
        self.assertIsInstance(text, Text)
        self.assertEqual(text.plain, "3 m")
        self.assertEqual(text.style, "bold")
        self.assertTrue(any(span.style == "cyan" for span in text.spans))

    def test_unit_and_number_text(self):
        """Test rendering of bare units and plain numbers."""
        self.assertEqual(as_text(m / s).plain, "m s^-1")
        self.assertEqual(as_text(5).plain, "5")
        self.assertEqual(as_text(Quantity(2)).plain, "2")

    def test_console_print(self):
        """Test printing a quantity through a rich console."""
        buffer = io.StringIO()
        console = Console(file=buffer, width=80, color_system=None)
        console.print(3 * m)
        self.assertEqual(buffer.getvalue(), "3 m\n")

    def test_table_cell(self):
        """Test placing a quantity in a rich table."""
        table = Table("distance")
        table.add_row(as_text(12 * m))
        buffer = io.StringIO()
        Console(file=buffer, width=80, color_system=None).print(table)
        self.assertIn("12 m", buffer.getvalue())


if __name__ == '__main__':
    unittest.main()
