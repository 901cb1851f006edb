"""Point-mutation calling from an aligned sequence pair."""
import logging

from alignment import GAP
from schemas import Mutation, MutationCounts

logger = logging.getLogger(__name__)

PURINES = frozenset("AG")
PYRIMIDINES = frozenset("CT")

def is_transition(a: str, b: str) -> bool:
    """Purine<->purine or pyrimidine<->pyrimidine substitution."""
    return (a in PURINES and b in PURINES) or (a in PYRIMIDINES and b in PYRIMIDINES)

def classify_mutations(aligned1: str, aligned2: str) -> tuple[str, list[Mutation], MutationCounts]:
    """
    Walk an alignment column by column.

    Returns the match string (`|` match, `*` substitution, blank for a gap),
    one Mutation per divergent column in alignment order, and the tallies.

    Indels are always reported as frameshifts. Substitutions are not mapped
    back to codons: they are `missense` when at least two more columns follow,
    otherwise `unknown`.
    """
    match_string = []
    mutations = []
    transitions = transversions = insertions = deletions = 0

    for i, (b1, b2) in enumerate(zip(aligned1, aligned2)):
        position = i + 1

        if b1 == b2:
            match_string.append("|")
        elif b1 == GAP:
            match_string.append(" ")
            insertions += 1
            mutations.append(Mutation(
                position=position, type="insertion", from_=GAP, to=b2, impact="frameshift",
            ))
        elif b2 == GAP:
            match_string.append(" ")
            deletions += 1
            mutations.append(Mutation(
                position=position, type="deletion", from_=b1, to=GAP, impact="frameshift",
            ))
        else:
            match_string.append("*")
            if is_transition(b1, b2):
                transitions += 1
            else:
                transversions += 1

            impact = "missense" if i + 2 < len(aligned1) else "unknown"
            mutations.append(Mutation(
                position=position, type="substitution", from_=b1, to=b2, impact=impact,
            ))

    counts = MutationCounts(
        total=len(mutations),
        transitions=transitions,
        transversions=transversions,
        insertions=insertions,
        deletions=deletions,
    )
    logger.debug("Called %d mutations over %d columns", len(mutations), len(aligned1))
    return "".join(match_string), mutations, counts

def mutation_rate(mutations: list[Mutation], aligned_length: int) -> float:
    if aligned_length == 0:
        return 0.0
    return len(mutations) / aligned_length
