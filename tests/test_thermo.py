import math
import unittest

from thermokin.constants import R_GAS
from thermokin.errors import UnknownSpeciesError
from thermokin.models import ReactionQuery, StoichiometricTerm, ThermodynamicRecord
from thermokin.thermo import (
    SpeciesTable,
    aggregate,
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
    reaction_gibbs_energy,
)
from thermokin.thermo.reaction import enthalpy_of_formation


def water_formation_query():
    # 2 H2 + O2 -> 2 H2O(g)
    table = SpeciesTable({
        "H2": ThermodynamicRecord(0.0, 130.68, 0.0),
        "O2": ThermodynamicRecord(0.0, 205.15, 0.0),
        "H2O": ThermodynamicRecord(-241.826, 188.835, -228.61),
    })
    return ReactionQuery(
        reactants=(StoichiometricTerm("H2", 2.0), StoichiometricTerm("O2", 1.0)),
        products=(StoichiometricTerm("H2O", 2.0),),
        species=table,
    )


class TestSpeciesTable(unittest.TestCase):
    def test_lookup(self):
        query = water_formation_query()
        record = query.species.lookup("H2O", "product")
        self.assertEqual(record.enthalpy_of_formation, -241.826)
        self.assertEqual(len(query.species), 3)
        self.assertIn("O2", query.species)

    def test_missing_species(self):
        table = SpeciesTable({})
        with self.assertRaises(UnknownSpeciesError) as ctx:
            table.lookup("XX2", "reactant")
        self.assertEqual(ctx.exception.formula, "XX2")
        self.assertEqual(ctx.exception.role, "reactant")
        self.assertEqual(str(ctx.exception), "No data found for reactant: XX2")


class TestReactionProperties(unittest.TestCase):
    def test_enthalpy(self):
        self.assertAlmostEqual(reaction_enthalpy(water_formation_query()), -483.652)

    def test_entropy(self):
        # 2*188.835 - (2*130.68 + 205.15)
        self.assertAlmostEqual(reaction_entropy(water_formation_query()), -88.84)

    def test_gibbs_of_formation(self):
        self.assertAlmostEqual(reaction_gibbs_energy(water_formation_query()), -457.22)

    def test_fractional_coefficients(self):
        query = water_formation_query()
        half = ReactionQuery(
            reactants=(StoichiometricTerm("H2", 1.0), StoichiometricTerm("O2", 0.5)),
            products=(StoichiometricTerm("H2O", 1.0),),
            species=query.species,
        )
        self.assertAlmostEqual(reaction_enthalpy(half), -241.826)

    def test_order_of_terms(self):
        query = water_formation_query()
        swapped = ReactionQuery(
            reactants=tuple(reversed(query.reactants)),
            products=query.products,
            species=query.species,
        )
        self.assertAlmostEqual(reaction_entropy(swapped), reaction_entropy(query))

    def test_missing_product(self):
        query = water_formation_query()
        bad = ReactionQuery(
            reactants=query.reactants,
            products=(StoichiometricTerm("XX2", 1.0),),
            species=query.species,
        )
        with self.assertRaises(UnknownSpeciesError) as ctx:
            reaction_enthalpy(bad)
        self.assertEqual(ctx.exception.formula, "XX2")
        self.assertEqual(ctx.exception.role, "product")

    def test_aggregate_sign(self):
        query = water_formation_query()
        total = aggregate(query.products, query.species, enthalpy_of_formation, -1.0, "product")
        self.assertAlmostEqual(total, 483.652)

    def test_empty_reaction(self):
        query = ReactionQuery(reactants=(), products=(), species=SpeciesTable({}))
        self.assertEqual(reaction_enthalpy(query), 0.0)


class TestGibbsAndEquilibrium(unittest.TestCase):
    def test_gibbs_energy(self):
        # kJ/mol and J/(mol K)
        self.assertAlmostEqual(gibbs_energy(-483.652, -88.84, 298.15), -483.652 + 298.15 * 0.08884)

    def test_equilibrium_constant_of_zero_gibbs(self):
        self.assertEqual(equilibrium_constant(0.0, 298.15), 1.0)

    def test_equilibrium_round_trip(self):
        for delta_g, t in [(-10.0, 298.15), (25.0, 500.0), (-0.5, 1200.0)]:
            k = equilibrium_constant(delta_g, t)
            recovered = -R_GAS * t * math.log(k) / 1000.0
            self.assertAlmostEqual(recovered, delta_g, places=9)

    def test_zero_temperature_propagates(self):
        self.assertTrue(math.isinf(equilibrium_constant(-10.0, 0.0)))
        self.assertEqual(equilibrium_constant(10.0, 0.0), 0.0)

    def test_overflow_is_infinite(self):
        self.assertTrue(math.isinf(equilibrium_constant(-1e6, 1.0)))


if __name__ == '__main__':
    unittest.main()
