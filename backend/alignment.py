"""Global pairwise alignment by edit distance."""
import logging

from codons import are_similar
from schemas import ProteinComparison

logger = logging.getLogger(__name__)

GAP = "-"

def edit_distance_matrix(s1: str, s2: str) -> list[list[int]]:
    """(n+1) x (m+1) Levenshtein cost matrix with unit indel/substitution costs."""
    n, m = len(s1), len(s2)
    matrix = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(n + 1):
        matrix[i][0] = i
    for j in range(m + 1):
        matrix[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,         # deletion
                matrix[i][j - 1] + 1,         # insertion
                matrix[i - 1][j - 1] + cost,  # match / substitution
            )

    return matrix

def edit_distance(s1: str, s2: str) -> int:
    return edit_distance_matrix(s1, s2)[len(s1)][len(s2)]

def align_sequences(s1: str, s2: str) -> tuple[str, str]:
    """
    Globally align two sequences and return both gapped strings.

    Traceback from the bottom-right cell resolves ties in a fixed order:
    match, then substitution, then deletion (gap in s2), then insertion
    (gap in s1). Equal-cost alignments differ only in this choice, and the
    mutation list is derived from it.
    """
    matrix = edit_distance_matrix(s1, s2)
    aligned1 = []
    aligned2 = []
    i, j = len(s1), len(s2)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and s1[i - 1] == s2[j - 1]:
            aligned1.append(s1[i - 1])
            aligned2.append(s2[j - 1])
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and matrix[i][j] == matrix[i - 1][j - 1] + 1:
            aligned1.append(s1[i - 1])
            aligned2.append(s2[j - 1])
            i -= 1
            j -= 1
        elif i > 0 and matrix[i][j] == matrix[i - 1][j] + 1:
            aligned1.append(s1[i - 1])
            aligned2.append(GAP)
            i -= 1
        else:
            aligned1.append(GAP)
            aligned2.append(s2[j - 1])
            j -= 1

    logger.debug(
        "Aligned %d x %d nt, edit distance %d, %d columns",
        len(s1), len(s2), matrix[len(s1)][len(s2)], len(aligned1),
    )
    # Built from the end backwards
    return "".join(reversed(aligned1)), "".join(reversed(aligned2))

def compare_proteins(protein1: str, protein2: str) -> ProteinComparison:
    """
    Position-by-position identity and similarity of two translations.

    Residues are compared without realignment over the shorter length;
    percentages are relative to the longer protein.
    """
    max_length = max(len(protein1), len(protein2))
    matches = 0
    similar = 0

    for a, b in zip(protein1, protein2):
        if a == b and a != GAP:
            matches += 1
            similar += 1
        elif are_similar(a, b):
            similar += 1

    identity = (matches / max_length * 100) if max_length > 0 else 0
    similarity = (similar / max_length * 100) if max_length > 0 else 0

    return ProteinComparison(
        identity=round(identity, 1),
        similarity=round(similarity, 1),
    )
