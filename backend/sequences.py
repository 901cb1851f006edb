"""Sequence cleaning and composition statistics."""
from io import StringIO

from Bio import SeqIO

NUCLEOTIDES = "ATCG"

# Anything outside A/T/C/G (e.g. N) complements to itself
_COMPLEMENT = str.maketrans("ATCG", "TAGC")

def clean_sequence(content: str) -> str:
    """Strip FASTA headers and whitespace from pasted text, uppercased.

    Multi-record FASTA input is concatenated in file order.
    """
    if content.lstrip().startswith(">"):
        content = "".join(str(record.seq) for record in SeqIO.parse(StringIO(content), "fasta"))
    return "".join(content.split()).upper()

def is_valid_dna(sequence: str) -> bool:
    return bool(sequence) and all(base in NUCLEOTIDES for base in sequence)

def gc_content(sequence: str) -> float:
    """Percentage of G/C symbols; 0 for an empty sequence."""
    if not sequence:
        return 0.0
    gc = sum(1 for base in sequence.upper() if base in "GC")
    return gc / len(sequence) * 100

def at_content(sequence: str) -> float:
    if not sequence:
        return 0.0
    return 100 - gc_content(sequence)

def nucleotide_counts(sequence: str) -> dict[str, int]:
    upper = sequence.upper()
    return {base: upper.count(base) for base in NUCLEOTIDES}

def reverse_complement(sequence: str) -> str:
    return sequence[::-1].translate(_COMPLEMENT)
