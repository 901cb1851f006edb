"""FastAPI application for nucleotide sequence analysis."""
import logging

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from analysis import SequenceTooLongError, analyze_sequence, check_length, compare_sequences
from config import ALLOWED_ORIGINS, HOST, LOG_LEVEL, PORT
from schemas import (
    Analysis, ComparisonRequest, ComparisonResult, PdbEntry,
    SequenceStats, SingleAnalysisRequest
)
from sequences import clean_sequence
from storage import storage
from structures import fetch_pdb_entry

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Sequence Analyzer", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """Report the first validation problem as {"message": ...} with status 400."""
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})

@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(SequenceTooLongError)
async def sequence_too_long(request: Request, exc: SequenceTooLongError):
    return JSONResponse(status_code=400, content={"message": str(exc)})

@app.get("/api/health")
async def health() -> dict:
    return {"status": "ok"}

# --- Analysis endpoints ---

@app.post("/api/analyze/single")
async def analyze_single(request: SingleAnalysisRequest) -> SequenceStats:
    """Composition, ORFs and translation of one sequence."""
    sequence = clean_sequence(request.sequence)
    check_length(sequence)

    result = await run_in_threadpool(analyze_sequence, sequence)
    logger.info("Analyzed %s (%d nt, %d ORFs)", request.name or "sequence", result.length, len(result.orfs))

    storage.save_analysis(
        "single",
        {"sequence": sequence, "name": request.name},
        result,
    )
    return result

@app.post("/api/analyze/compare")
async def analyze_compare(request: ComparisonRequest) -> ComparisonResult:
    """Align two sequences and list the mutations between them."""
    s1 = clean_sequence(request.sequence1)
    s2 = clean_sequence(request.sequence2)
    check_length(s1)
    check_length(s2)

    result = await run_in_threadpool(compare_sequences, s1, s2)

    storage.save_analysis(
        "comparison",
        {"sequence1": s1, "sequence2": s2, "name": request.name},
        result,
    )
    return result

@app.get("/api/history")
async def history() -> list[Analysis]:
    """Saved analyses, newest first."""
    return storage.get_history()

# --- Structure endpoints ---

@app.get("/api/protein/structure/{pdb_id}")
async def protein_structure(pdb_id: str) -> PdbEntry:
    """Fetch structure metadata from the RCSB PDB."""
    try:
        return await fetch_pdb_entry(pdb_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except httpx.HTTPError as e:
        logger.warning("PDB lookup failed for %s: %s", pdb_id, e)
        raise HTTPException(status_code=404, detail=f"PDB entry not found: {pdb_id}")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
