"""Protein structure metadata from the RCSB PDB."""
import logging
import re

import httpx

from config import HTTP_TIMEOUT, MOLSTAR_VIEWER_URL, RCSB_DATA_URL
from schemas import PdbEntry

logger = logging.getLogger(__name__)

PDB_ID = re.compile(r"^[0-9][A-Za-z0-9]{3}$")

def viewer_url(pdb_id: str) -> str:
    return f"{MOLSTAR_VIEWER_URL}?pdb={pdb_id.lower()}&hide-controls=0"

async def fetch_pdb_entry(pdb_id: str) -> PdbEntry:
    """Fetch title, method and resolution for a PDB entry."""
    if not PDB_ID.match(pdb_id):
        raise ValueError(f"Invalid PDB ID: {pdb_id}")

    url = f"{RCSB_DATA_URL}/{pdb_id.upper()}"

    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
        resp = await client.get(url)
        resp.raise_for_status()
        data = resp.json()

    info = data.get("rcsb_entry_info", {})
    resolutions = info.get("resolution_combined") or []
    methods = data.get("exptl") or [{}]

    return PdbEntry(
        id=data.get("rcsb_id", pdb_id.upper()),
        title=data.get("struct", {}).get("title", ""),
        method=methods[0].get("method", ""),
        resolution=resolutions[0] if resolutions else None,
        deposited=data.get("rcsb_accession_info", {}).get("deposit_date", ""),
        viewer_url=viewer_url(pdb_id),
    )
