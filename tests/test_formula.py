import unittest

from chemkit.elements import PERIODIC_TABLE
from chemkit.errors import CountTooLarge, EmptyFormula, InvalidSymbolStart, ParseError, UnknownElement
from chemkit.database import default_database
from chemkit.formula import (
    format_formula,
    formula_mass,
    parse_formula,
    parse_reactant_list,
    reaction_masses,
)
from chemkit.models import ElementCount, Formula


def composition(formula):
    return {entry.element.symbol: entry.count for entry in formula.entries}


class TestParseFormula(unittest.TestCase):
    def test_simple(self):
        water = parse_formula("H2O")
        self.assertEqual(composition(water), {"H": 2, "O": 1})
        self.assertEqual(water.coefficient, 1)

    def test_entries_keep_first_seen_order(self):
        glucose = parse_formula("C6H12O6")
        self.assertEqual([e.element.symbol for e in glucose.entries], ["C", "H", "O"])
        self.assertEqual(composition(parse_formula("C2H6")), {"C": 2, "H": 6})

    def test_leading_coefficient(self):
        formula = parse_formula("2H2O")
        self.assertEqual(formula.coefficient, 2)
        self.assertEqual(composition(formula), {"H": 2, "O": 1})
        self.assertEqual(parse_formula("12CO2").coefficient, 12)

    def test_repeated_symbols_are_merged(self):
        formula = parse_formula("O2O3")
        self.assertEqual(formula.element_count, 1)
        self.assertEqual(composition(formula), {"O": 5})
        self.assertEqual(composition(parse_formula("CH3CH2OH")), {"C": 2, "H": 6, "O": 1})

    def test_two_letter_symbols(self):
        self.assertEqual(composition(parse_formula("NaCl")), {"Na": 1, "Cl": 1})
        self.assertEqual(composition(parse_formula("CO")), {"C": 1, "O": 1})
        self.assertEqual(composition(parse_formula("Co")), {"Co": 1})

    def test_elements_reference_the_catalog(self):
        formula = parse_formula("NaCl")
        self.assertIs(formula.entries[0].element, PERIODIC_TABLE.by_symbol("Na"))

    def test_whitespace_is_ignored(self):
        self.assertEqual(parse_formula("H2O"), parse_formula("H2O "))
        formula = parse_formula("  2 H2 O ")
        self.assertEqual(formula.coefficient, 2)
        self.assertEqual(composition(formula), {"H": 2, "O": 1})

    def test_parentheses_are_skipped_without_multiplying(self):
        self.assertEqual(composition(parse_formula("Ca(OH)")), {"Ca": 1, "O": 1, "H": 1})
        with self.assertRaises(InvalidSymbolStart) as ctx:
            parse_formula("Ca(OH)2")
        self.assertEqual(ctx.exception.position, 6)
        self.assertEqual(ctx.exception.character, "2")

    def test_zero_reads_as_one(self):
        formula = parse_formula("0H0")
        self.assertEqual(formula.coefficient, 1)
        self.assertEqual(composition(formula), {"H": 1})

    def test_overlong_counts(self):
        with self.assertRaises(CountTooLarge):
            parse_formula("H" + "9" * 5000)
        with self.assertRaises(CountTooLarge):
            parse_formula("9" * 5000 + "H2O")
        self.assertEqual(composition(parse_formula("H999999")), {"H": 999999})
        self.assertEqual(parse_formula("0000000002H2O").coefficient, 2)

    def test_unknown_element(self):
        with self.assertRaises(UnknownElement) as ctx:
            parse_formula("Xx2")
        self.assertEqual(ctx.exception.symbol, "Xx")

    def test_invalid_symbol_start(self):
        with self.assertRaises(InvalidSymbolStart) as ctx:
            parse_formula("h2o")
        self.assertEqual(ctx.exception.position, 0)
        with self.assertRaises(InvalidSymbolStart):
            parse_formula("H2-O")

    def test_empty_formula(self):
        for text in ("", "   ", "2", "()"):
            with self.subTest(text=text):
                with self.assertRaises(EmptyFormula):
                    parse_formula(text)

    def test_parse_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            parse_formula("Xx")
        self.assertTrue(issubclass(EmptyFormula, ParseError))


class TestFormulaText(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_formula(parse_formula("2H2O")), "2H2O")
        self.assertEqual(format_formula(parse_formula("O2O3")), "O5")
        self.assertEqual(format_formula(parse_formula("1NaCl")), "NaCl")

    def test_round_trip(self):
        for text in ("H2O", "2CO2", "C6H12O6", "Fe2O3", "3O2", "CuSO4", "Na2SO4", "HCl"):
            with self.subTest(text=text):
                original = parse_formula(text)
                reparsed = parse_formula(format_formula(original))
                self.assertEqual(reparsed, original)
                self.assertEqual(reparsed.coefficient, original.coefficient)

    def test_mass(self):
        self.assertAlmostEqual(formula_mass(parse_formula("H2O")), 18.015, places=3)
        self.assertAlmostEqual(formula_mass(parse_formula("2H2O")), 36.030, places=3)

    def test_reaction_masses(self):
        water = default_database().find_by_string("H2 + O2")
        reactant_mass, product_mass = reaction_masses(water)
        self.assertAlmostEqual(reactant_mass, product_mass, places=6)
        self.assertAlmostEqual(product_mass, 36.030, places=3)


class TestReactantList(unittest.TestCase):
    def test_split_and_trim(self):
        formulas = parse_reactant_list("  CH4 +2O2 ")
        self.assertEqual([format_formula(f) for f in formulas], ["CH4", "2O2"])

    def test_bad_tokens_are_dropped(self):
        with self.assertLogs("chemkit.formula", level="DEBUG"):
            formulas = parse_reactant_list("C + Xx + + O2")
        self.assertEqual([format_formula(f) for f in formulas], ["C", "O2"])

    def test_overlong_count_is_dropped(self):
        formulas = parse_reactant_list("C + O2 + H" + "9" * 5000)
        self.assertEqual([format_formula(f) for f in formulas], ["C", "O2"])


class TestFormulaModel(unittest.TestCase):
    def test_equality_ignores_order_and_coefficient(self):
        self.assertEqual(parse_formula("H2O"), parse_formula("OH2"))
        self.assertEqual(parse_formula("2H2O"), parse_formula("H2O"))
        self.assertNotEqual(parse_formula("H2O"), parse_formula("H2O2"))
        self.assertEqual(len({parse_formula("H2O"), parse_formula("OH2")}), 1)

    def test_rejects_duplicate_elements(self):
        oxygen = PERIODIC_TABLE.by_symbol("O")
        with self.assertRaises(ValueError):
            Formula(entries=(ElementCount(oxygen, 2), ElementCount(oxygen, 3)))

    def test_rejects_non_positive_values(self):
        oxygen = PERIODIC_TABLE.by_symbol("O")
        with self.assertRaises(ValueError):
            ElementCount(oxygen, 0)
        with self.assertRaises(ValueError):
            Formula(entries=(ElementCount(oxygen, 2),), coefficient=0)

    def test_helpers(self):
        water = parse_formula("H2O")
        hydrogen = PERIODIC_TABLE.by_symbol("H")
        self.assertEqual(water.count_of(hydrogen), 2)
        self.assertEqual(water.count_of(PERIODIC_TABLE.by_symbol("C")), 0)
        self.assertTrue(water.contains(hydrogen))
        self.assertEqual(water.element_numbers, frozenset({1, 8}))


if __name__ == '__main__':
    unittest.main()
