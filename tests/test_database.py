import dataclasses
import threading
import unittest

from chemkit.balance import atom_totals, check_balanced
from chemkit.database import ReactionDatabase, default_database
from chemkit.elements import PERIODIC_TABLE
from chemkit.errors import ReactionCapacityError, SeedDataError
from chemkit.formula import format_formula, parse_formula
from chemkit.models import ReactionCondition, ReactionType
from chemkit.seeds import SEED_REACTIONS, ReactionSeed


def formulas(*texts):
    return [parse_formula(text) for text in texts]


class TestReactionDatabase(unittest.TestCase):
    def setUp(self):
        self.db = ReactionDatabase.from_seeds()

    def test_seed_count_and_order(self):
        self.assertEqual(self.db.count(), 19)
        self.assertEqual(len(self.db), 19)
        self.assertEqual(self.db.get(0).description, "Combustion of carbon")
        self.assertEqual(self.db.get(18).description, "Burning magnesium")
        self.assertEqual([r.description for r in self.db], [s.description for s in SEED_REACTIONS])

    def test_get_out_of_range(self):
        self.assertIsNone(self.db.get(19))
        self.assertIsNone(self.db.get(-1))

    def test_every_seed_is_balanced(self):
        for reaction in self.db:
            with self.subTest(reaction=reaction.description):
                self.assertTrue(reaction.is_balanced)
                self.assertTrue(check_balanced(reaction))

    def test_reactions_are_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.db.get(0).is_balanced = False

    def test_find_by_reactant_set_is_order_independent(self):
        forward = self.db.find_by_reactant_set(formulas("C", "O2"))
        backward = self.db.find_by_reactant_set(formulas("O2", "C"))
        self.assertIsNotNone(forward)
        self.assertIs(forward, backward)
        self.assertEqual(forward.description, "Combustion of carbon")

    def test_find_by_string(self):
        rxn = self.db.find_by_string("C + O2")
        self.assertEqual(rxn.description, "Combustion of carbon")
        self.assertEqual(rxn.reaction_type, ReactionType.COMBUSTION)
        self.assertEqual(rxn.condition, ReactionCondition.HEATED)
        self.assertTrue(rxn.is_balanced)
        self.assertEqual(atom_totals(rxn.reactants), {6: 1, 8: 2})
        self.assertEqual(atom_totals(rxn.products), {6: 1, 8: 2})

    def test_find_ignores_counts_and_coefficients(self):
        self.assertEqual(self.db.find_by_string("H2 + O2").description, "Combustion of hydrogen")
        self.assertEqual(self.db.find_by_string("Na + Cl2").description, "Formation of table salt")
        self.assertEqual(self.db.find_by_string("O2 + CH4").description, "Combustion of methane")

    def test_first_match_wins(self):
        # 2H2O and 2H2O2 share the element set {H, O}.
        self.assertEqual(self.db.find_by_string("H2O2").description, "Electrolysis of water")

    def test_unparseable_tokens_are_dropped(self):
        self.assertEqual(self.db.find_by_string("C + O2 + Xx").description, "Combustion of carbon")
        self.assertIsNone(self.db.find_by_string("Xx + O2"))
        self.assertEqual(
            self.db.find_by_string("C + O2 + H" + "9" * 5000).description, "Combustion of carbon"
        )

    def test_miss(self):
        self.assertIsNone(self.db.find_by_string("Au + O2"))
        self.assertIsNone(self.db.find_by_string(""))

    def test_too_many_reactants(self):
        with self.assertRaises(ReactionCapacityError):
            self.db.find_by_string(" + ".join(["H2"] * 11))

    def test_find_by_element(self):
        sodium = PERIODIC_TABLE.by_symbol("Na")
        found = self.db.find_by_element(sodium)
        self.assertEqual(
            [r.description for r in found],
            [
                "Formation of table salt",
                "Neutralization reaction",
                "Neutralization with sulfuric acid",
                "Precipitation of silver chloride",
                "Precipitation of barium sulfate",
            ],
        )

    def test_find_by_element_single_hit(self):
        copper = PERIODIC_TABLE.by_symbol("Cu")
        self.assertEqual([r.description for r in self.db.find_by_element(copper)], ["Iron displaces copper"])

    def test_find_by_element_truncates(self):
        oxygen = PERIODIC_TABLE.by_symbol("O")
        self.assertGreater(len(self.db.find_by_element(oxygen)), 1)
        limited = self.db.find_by_element(oxygen, max_results=1)
        self.assertEqual(len(limited), 1)
        self.assertEqual(limited[0].description, "Combustion of carbon")
        self.assertEqual(self.db.find_by_element(oxygen, max_results=0), [])
        self.assertEqual(self.db.find_by_element(PERIODIC_TABLE.by_symbol("Au")), [])

    def test_predict_products(self):
        products = self.db.predict_products(formulas("CH4", "O2"))
        self.assertEqual([format_formula(p) for p in products], ["CO2", "2H2O"])
        self.assertIsNone(self.db.predict_products(formulas("Au")))


class TestSeeding(unittest.TestCase):
    def test_bad_seed_fails_loudly(self):
        seeds = [ReactionSeed(("C", "Qq2"), ("CO2",), ReactionType.OTHER, ReactionCondition.NORMAL, "broken")]
        with self.assertRaises(SeedDataError):
            ReactionDatabase.from_seeds(seeds)

    def test_unbalanced_seed_is_logged(self):
        seeds = [ReactionSeed(("H2", "O2"), ("H2O",), ReactionType.SYNTHESIS, ReactionCondition.NORMAL, "lopsided")]
        with self.assertLogs("chemkit.database", level="WARNING"):
            db = ReactionDatabase.from_seeds(seeds)
        self.assertFalse(db.get(0).is_balanced)

    def test_reversible_flag(self):
        seeds = [ReactionSeed(("N2", "3H2"), ("2NH3",), ReactionType.SYNTHESIS, ReactionCondition.CATALYST,
                              "Haber", reversible=True)]
        self.assertTrue(ReactionDatabase.from_seeds(seeds).get(0).is_reversible)
        self.assertFalse(ReactionDatabase.from_seeds().get(5).is_reversible)


class TestDefaultDatabase(unittest.TestCase):
    def test_built_once(self):
        self.assertIs(default_database(), default_database())
        self.assertEqual(default_database().count(), 19)

    def test_concurrent_first_use(self):
        seen = []
        threads = [threading.Thread(target=lambda: seen.append(default_database())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(len({id(db) for db in seen}), 1)


if __name__ == '__main__':
    unittest.main()
