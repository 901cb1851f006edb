"""Assemble single-sequence and comparison results from the engine."""
import logging

from alignment import align_sequences, compare_proteins
from codons import translate
from config import FULL_COMPARISON_STATS, MAX_SEQUENCE_LENGTH
from mutations import classify_mutations, mutation_rate
from orfs import find_orfs
from schemas import Alignment, ComparisonResult, NucleotideCounts, SequenceStats
from sequences import at_content, gc_content, nucleotide_counts, reverse_complement

logger = logging.getLogger(__name__)

class SequenceTooLongError(ValueError):
    """Raised when an input exceeds MAX_SEQUENCE_LENGTH."""

def check_length(sequence: str, limit: int = MAX_SEQUENCE_LENGTH) -> None:
    if limit and len(sequence) > limit:
        raise SequenceTooLongError(
            f"Sequence length {len(sequence)} exceeds the maximum of {limit} nt"
        )

def analyze_sequence(sequence: str) -> SequenceStats:
    """Composition, ORFs and whole-sequence translation of a cleaned sequence."""
    return SequenceStats(
        length=len(sequence),
        gc_content=round(gc_content(sequence), 2),
        at_content=round(at_content(sequence), 2),
        nucleotide_counts=NucleotideCounts(**nucleotide_counts(sequence)),
        reverse_complement=reverse_complement(sequence),
        orfs=find_orfs(sequence),
        protein=translate(sequence),
    )

def _comparison_stats(sequence: str, full_stats: bool) -> SequenceStats:
    if full_stats:
        return analyze_sequence(sequence)
    # Only length and protein are filled for each side of a comparison
    return SequenceStats(length=len(sequence), protein=translate(sequence))

def compare_sequences(s1: str, s2: str, full_stats: bool = FULL_COMPARISON_STATS) -> ComparisonResult:
    """Align two cleaned sequences and call the point mutations between them."""
    aligned1, aligned2 = align_sequences(s1, s2)
    match_string, mutations, counts = classify_mutations(aligned1, aligned2)

    stats1 = _comparison_stats(s1, full_stats)
    stats2 = _comparison_stats(s2, full_stats)

    logger.info(
        "Compared %d nt vs %d nt: %d mutations (%d ts, %d tv, %d ins, %d del)",
        len(s1), len(s2), counts.total, counts.transitions,
        counts.transversions, counts.insertions, counts.deletions,
    )

    return ComparisonResult(
        seq1_stats=stats1,
        seq2_stats=stats2,
        alignment=Alignment(
            seq1_aligned=aligned1,
            seq2_aligned=aligned2,
            match_string=match_string,
        ),
        mutations=mutations,
        mutation_counts=counts,
        mutation_rate=mutation_rate(mutations, len(aligned1)),
        protein_comparison=compare_proteins(stats1.protein, stats2.protein),
    )
