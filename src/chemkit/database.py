"""In-memory reaction database.

A :class:`ReactionDatabase` is built once from seed reactions and never changes
afterwards. Queries return the stored :class:`Reaction` objects, which are
immutable, so callers can share them freely.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Iterator, Sequence

from chemkit.constants import DEFAULT_MAX_RESULTS, MAX_REACTANTS
from chemkit.elements import PERIODIC_TABLE, Element, PeriodicTable
from chemkit.errors import ReactionCapacityError
from chemkit.formula import parse_reactant_list
from chemkit.matching import formulas_match_set, reaction_mentions
from chemkit.models import Formula, Reaction
from chemkit.seeds import SEED_REACTIONS, ReactionSeed, build_reaction

logger = logging.getLogger(__name__)


class ReactionDatabase:
    """Ordered, read-only collection of known reactions."""

    def __init__(self, reactions: Iterable[Reaction], catalog: PeriodicTable = PERIODIC_TABLE):
        self._reactions = tuple(reactions)
        self.catalog = catalog

    @classmethod
    def from_seeds(
        cls,
        seeds: Sequence[ReactionSeed] = SEED_REACTIONS,
        catalog: PeriodicTable = PERIODIC_TABLE,
    ) -> "ReactionDatabase":
        """Build a database from seed records.

        Raises:
            SeedDataError: A seed formula does not parse.
        """
        reactions = [build_reaction(seed, catalog) for seed in seeds]
        for reaction in reactions:
            if not reaction.is_balanced:
                logger.warning("Seed reaction %r is not balanced", reaction.description)
        logger.info("Built reaction database with %d reactions", len(reactions))
        return cls(reactions, catalog)

    def __len__(self) -> int:
        return len(self._reactions)

    def __iter__(self) -> Iterator[Reaction]:
        return iter(self._reactions)

    def count(self) -> int:
        return len(self._reactions)

    def get(self, index: int) -> Reaction | None:
        """Reaction at ``index``, or None when out of range."""
        if 0 <= index < len(self._reactions):
            return self._reactions[index]
        return None

    def find_by_reactant_set(self, reactants: Sequence[Formula]) -> Reaction | None:
        """First reaction whose reactants pair up with ``reactants``.

        Order, counts and coefficients are ignored, so ``[O2, C]`` finds the
        same reaction as ``[C, O2]``.
        """
        for reaction in self._reactions:
            if formulas_match_set(reactants, reaction.reactants):
                return reaction
        return None

    def find_by_string(self, text: str) -> Reaction | None:
        """Look up reactants written as ``"C + O2"``.

        Tokens that do not parse are left out of the query.
        """
        reactants = parse_reactant_list(text, self.catalog)
        if len(reactants) > MAX_REACTANTS:
            raise ReactionCapacityError(
                f"A reaction holds at most {MAX_REACTANTS} reactants, got {len(reactants)}"
            )
        return self.find_by_reactant_set(reactants)

    def find_by_element(self, element: Element, max_results: int = DEFAULT_MAX_RESULTS) -> list[Reaction]:
        """Reactions involving ``element``, in database order, at most ``max_results``."""
        results: list[Reaction] = []
        if max_results <= 0:
            return results
        for reaction in self._reactions:
            if reaction_mentions(reaction, element):
                results.append(reaction)
                if len(results) >= max_results:
                    break
        return results

    def predict_products(self, reactants: Sequence[Formula]) -> tuple[Formula, ...] | None:
        """Products of the known reaction for ``reactants``, if there is one."""
        reaction = self.find_by_reactant_set(reactants)
        if reaction is None:
            return None
        return reaction.products


_default_lock = threading.Lock()
_default_database: ReactionDatabase | None = None


def default_database() -> ReactionDatabase:
    """Process-wide database of the built-in seed reactions, built on first use."""
    global _default_database
    with _default_lock:
        if _default_database is None:
            _default_database = ReactionDatabase.from_seeds()
    return _default_database
