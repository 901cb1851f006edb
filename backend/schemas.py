"""Data models for the sequence analysis service."""
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from sequences import clean_sequence, is_valid_dna

MutationType = Literal["substitution", "insertion", "deletion"]
MutationImpact = Literal["silent", "missense", "nonsense", "frameshift", "unknown"]

class CamelModel(BaseModel):
    """Immutable value object serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

class Orf(CamelModel):
    start: int  # 1-based, inclusive
    end: int
    length: int
    dna: str
    protein: str
    frame: int  # 1, 2 or 3

class NucleotideCounts(BaseModel):
    # Keys stay A/T/C/G on the wire
    model_config = ConfigDict(frozen=True)

    A: int = 0
    T: int = 0
    C: int = 0
    G: int = 0

class SequenceStats(CamelModel):
    length: int
    gc_content: float = 0
    at_content: float = 0
    nucleotide_counts: NucleotideCounts = NucleotideCounts()
    reverse_complement: str = ""
    orfs: list[Orf] = []
    protein: str = ""

class Mutation(CamelModel):
    position: int  # 1-based alignment column
    type: MutationType
    from_: str = Field(alias="from")
    to: str
    impact: MutationImpact

class MutationCounts(CamelModel):
    total: int = 0
    transitions: int = 0
    transversions: int = 0
    insertions: int = 0
    deletions: int = 0

class Alignment(CamelModel):
    seq1_aligned: str
    seq2_aligned: str
    match_string: str
    score: float = 0  # not computed by the edit-distance aligner

class ProteinComparison(CamelModel):
    identity: float
    similarity: float

class ComparisonResult(CamelModel):
    seq1_stats: SequenceStats
    seq2_stats: SequenceStats
    alignment: Alignment
    mutations: list[Mutation]
    mutation_counts: MutationCounts
    mutation_rate: float
    protein_comparison: ProteinComparison

class Analysis(CamelModel):
    id: str
    type: Literal["single", "comparison"]
    input: dict
    results: Union[ComparisonResult, SequenceStats]
    created_at: str

class PdbEntry(CamelModel):
    id: str
    title: str = ""
    method: str = ""
    resolution: Optional[float] = None
    deposited: str = ""
    viewer_url: str

def _check_dna(value: str) -> str:
    if not is_valid_dna(clean_sequence(value)):
        raise PydanticCustomError(
            "dna_sequence", "Invalid DNA sequence. Only A, T, C, G allowed."
        )
    return value

class SingleAnalysisRequest(BaseModel):
    sequence: str
    name: Optional[str] = None

    @field_validator("sequence")
    @classmethod
    def sequence_is_dna(cls, v: str) -> str:
        return _check_dna(v)

class ComparisonRequest(BaseModel):
    sequence1: str
    sequence2: str
    name: Optional[str] = None

    @field_validator("sequence1", "sequence2")
    @classmethod
    def sequences_are_dna(cls, v: str) -> str:
        return _check_dna(v)
