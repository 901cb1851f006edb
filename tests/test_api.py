"""Tests for the HTTP API.

Uses FastAPI's TestClient; the RCSB lookup is served by a mocked
httpx.AsyncClient so no network access is needed.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from storage import storage

client = TestClient(app)

MOCK_PDB_ENTRY = {
    "rcsb_id": "1CBS",
    "struct": {"title": "CELLULAR RETINOIC ACID BINDING PROTEIN TYPE II"},
    "exptl": [{"method": "X-RAY DIFFRACTION"}],
    "rcsb_entry_info": {"resolution_combined": [1.8]},
    "rcsb_accession_info": {"deposit_date": "1994-09-28T00:00:00+0000"},
}


@pytest.fixture(autouse=True)
def empty_history():
    storage.clear()
    yield
    storage.clear()


class MockResp:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self._payload


@pytest.fixture
def mock_rcsb(monkeypatch):
    """Replace httpx.AsyncClient with one that returns MOCK_PDB_ENTRY."""
    requested = []

    class DummyAsyncClient:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, **kwargs):
            requested.append(url)
            return MockResp(MOCK_PDB_ENTRY)

    monkeypatch.setattr("httpx.AsyncClient", DummyAsyncClient)
    return requested


@pytest.fixture
def failing_rcsb(monkeypatch):
    class DummyAsyncClient:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, **kwargs):
            raise httpx.ConnectError("connection refused")

    monkeypatch.setattr("httpx.AsyncClient", DummyAsyncClient)


def test_health():
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_single():
    response = client.post("/api/analyze/single", json={"sequence": ">s1\natgaaataa\n"})

    assert response.status_code == 200
    data = response.json()
    assert data["length"] == 9
    assert data["gcContent"] == 11.11
    assert data["atContent"] == 88.89
    assert data["nucleotideCounts"] == {"A": 6, "T": 2, "C": 0, "G": 1}
    assert data["reverseComplement"] == "TTATTTCAT"
    assert data["orfs"] == []
    assert data["protein"] == "MK_"


def test_analyze_single_reports_orfs():
    seq = "ATG" + "AAA" * 8 + "TAA"
    response = client.post("/api/analyze/single", json={"sequence": seq})

    orfs = response.json()["orfs"]
    assert orfs == [{
        "start": 1, "end": 30, "length": 30, "dna": seq,
        "protein": "M" + "K" * 8, "frame": 1,
    }]


def test_invalid_sequence_rejected():
    response = client.post("/api/analyze/single", json={"sequence": "ATGXXX"})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid DNA sequence. Only A, T, C, G allowed."}
    assert storage.get_history() == []


def test_missing_sequence_rejected():
    response = client.post("/api/analyze/compare", json={"sequence1": "ATCG"})

    assert response.status_code == 400
    assert "message" in response.json()


def test_too_long_sequence_rejected():
    response = client.post("/api/analyze/single", json={"sequence": "A" * 10001})

    assert response.status_code == 400
    assert "exceeds" in response.json()["message"]


def test_compare():
    response = client.post(
        "/api/analyze/compare",
        json={"sequence1": "ATCG", "sequence2": "attg", "name": "demo"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["alignment"] == {
        "seq1Aligned": "ATCG",
        "seq2Aligned": "ATTG",
        "matchString": "||*|",
        "score": 0,
    }
    assert data["mutations"] == [{
        "position": 3, "type": "substitution", "from": "C", "to": "T", "impact": "unknown",
    }]
    assert data["mutationCounts"] == {
        "total": 1, "transitions": 1, "transversions": 0, "insertions": 0, "deletions": 0,
    }
    assert data["mutationRate"] == 0.25
    assert data["seq1Stats"]["protein"] == "I"
    assert data["proteinComparison"] == {"identity": 100.0, "similarity": 100.0}


def test_history_records_cleaned_input():
    client.post("/api/analyze/single", json={"sequence": "atg cc", "name": "first"})
    client.post("/api/analyze/compare", json={"sequence1": "ATCG", "sequence2": "ATG"})

    response = client.get("/api/history")

    assert response.status_code == 200
    history = response.json()
    assert [h["type"] for h in history] == ["comparison", "single"]
    assert history[1]["input"] == {"sequence": "ATGCC", "name": "first"}
    assert history[0]["results"]["mutations"][0]["type"] == "deletion"
    assert "createdAt" in history[0]


def test_protein_structure(mock_rcsb):
    response = client.get("/api/protein/structure/1cbs")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "1CBS"
    assert data["method"] == "X-RAY DIFFRACTION"
    assert data["resolution"] == 1.8
    assert data["viewerUrl"].startswith("https://molstar.org/viewer/?pdb=1cbs")
    assert mock_rcsb[0].endswith("/1CBS")


def test_protein_structure_invalid_id():
    response = client.get("/api/protein/structure/notanid")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid PDB ID: notanid"}


def test_protein_structure_lookup_failure(failing_rcsb):
    response = client.get("/api/protein/structure/4hhb")

    assert response.status_code == 404
    assert response.json() == {"message": "PDB entry not found: 4hhb"}


def test_nucleotide_counts_keep_uppercase_keys():
    """Counts are keyed A/T/C/G in single, full-stats and history payloads."""
    response = client.post("/api/analyze/single", json={"sequence": "ATGC"})

    assert response.json()["nucleotideCounts"] == {"A": 1, "T": 1, "C": 1, "G": 1}
    history = client.get("/api/history").json()
    assert history[0]["results"]["nucleotideCounts"] == {"A": 1, "T": 1, "C": 1, "G": 1}


def test_unknown_route_uses_message_shape():
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert "message" in response.json()
