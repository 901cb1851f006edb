"""Codon translation and amino-acid lookup tables."""
from types import MappingProxyType

from Bio.Data.CodonTable import standard_dna_table

STOP_SYMBOL = "_"
UNKNOWN_SYMBOL = "X"

CODON_TABLE = MappingProxyType({
    **standard_dna_table.forward_table,
    **{codon: STOP_SYMBOL for codon in standard_dna_table.stop_codons},
})

START_CODON = "ATG"
STOP_CODONS = frozenset(standard_dna_table.stop_codons)

AMINO_ACID_NAMES = MappingProxyType({
    "A": "Alanine", "R": "Arginine", "N": "Asparagine", "D": "Aspartate",
    "C": "Cysteine", "E": "Glutamate", "Q": "Glutamine", "G": "Glycine",
    "H": "Histidine", "I": "Isoleucine", "L": "Leucine", "K": "Lysine",
    "M": "Methionine", "F": "Phenylalanine", "P": "Proline", "S": "Serine",
    "T": "Threonine", "W": "Tryptophan", "Y": "Tyrosine", "V": "Valine",
    "-": "Gap", "*": "Stop Codon", STOP_SYMBOL: "Stop Codon", UNKNOWN_SYMBOL: "Unknown",
})

# Physicochemically similar residues (BLOSUM62-like), checked in both directions
SIMILAR_RESIDUES = MappingProxyType({
    "A": frozenset("SGT"),
    "D": frozenset("EN"),
    "E": frozenset("DQ"),
    "F": frozenset("YW"),
    "I": frozenset("LMV"),
    "K": frozenset("R"),
    "L": frozenset("IMV"),
    "M": frozenset("ILV"),
    "N": frozenset("DST"),
    "Q": frozenset("EK"),
    "R": frozenset("K"),
    "S": frozenset("ATN"),
    "T": frozenset("AS"),
    "V": frozenset("ILM"),
    "W": frozenset("Y"),
    "Y": frozenset("FW"),
})

def translate_codon(codon: str) -> str:
    """Amino acid for a codon, `_` for stops, `X` for anything not in the table."""
    return CODON_TABLE.get(codon.upper(), UNKNOWN_SYMBOL)

def translate(dna: str) -> str:
    """Translate in non-overlapping triplets; a trailing partial codon is dropped."""
    return "".join(translate_codon(dna[i:i + 3]) for i in range(0, len(dna) - 2, 3))

def amino_acid_name(symbol: str) -> str:
    return AMINO_ACID_NAMES.get(symbol.upper(), "Unknown")

def are_similar(a: str, b: str) -> bool:
    """Check if two amino acids are similar."""
    a, b = a.upper(), b.upper()
    if a == b:
        return True
    return b in SIMILAR_RESIDUES.get(a, ()) or a in SIMILAR_RESIDUES.get(b, ())
