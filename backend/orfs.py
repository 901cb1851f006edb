"""Open reading frame detection on the forward strand."""
import logging

from codons import START_CODON, STOP_CODONS, translate
from config import MIN_ORF_LENGTH
from schemas import Orf

logger = logging.getLogger(__name__)

def find_orfs(sequence: str, min_length: int = MIN_ORF_LENGTH) -> list[Orf]:
    """
    Find ATG..stop ORFs in the three forward reading frames.

    Within a frame the first start codon opens an ORF and the next in-frame
    stop closes it; ORFs never overlap or nest inside one frame. Spans shorter
    than `min_length` are dropped, and an ORF still open at the end of the
    sequence is discarded. The protein excludes the stop codon. Results are
    sorted longest first (stable, so ties keep frame/start order).
    """
    orfs = []

    for frame in range(3):
        open_at = None  # sequence index of the open start codon

        for i in range(frame, len(sequence) - 2, 3):
            codon = sequence[i:i + 3]

            if codon == START_CODON and open_at is None:
                open_at = i
            elif codon in STOP_CODONS and open_at is not None:
                dna = sequence[open_at:i + 3]
                if len(dna) >= min_length:
                    orfs.append(Orf(
                        start=open_at + 1,
                        end=i + 3,
                        length=len(dna),
                        dna=dna,
                        protein=translate(dna[:-3]),
                        frame=frame + 1,
                    ))
                open_at = None

    orfs.sort(key=lambda orf: orf.length, reverse=True)
    logger.debug("Found %d ORFs in %d nt", len(orfs), len(sequence))
    return orfs
