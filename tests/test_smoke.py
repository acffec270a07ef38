from fastapi.testclient import TestClient
from zone_arranger.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_arrange_text():
    r = client.post("/arrange", json={"text": "FDT325FAT22-001 FBB25\nFBB325-3"})
    assert r.status_code == 200

    data = r.json()
    assert data["output"] == "FDT325FAT22-001\tFBB025\tFBB325-3"
    assert data["report"]["summary"]["strategy"] == "legacy_merge"
    assert data["report"]["warnings"] == []

def test_arrange_blank_text():
    r = client.post("/arrange", json={"text": "   "})
    assert r.status_code == 200

    data = r.json()
    assert data["output"] == "   "
    assert data["report"]["normalizations"]["blank_input"] is True
    assert data["report"]["errors"] == []

def test_arrange_file_vertical_with_crlf():
    raw = "FDT325FAT22-001\r\nFDT325FAT22-002\r\n\r\nFBB325\r\n\r\nFBB325-3\r\nFBB326-1\r\n".encode("utf-8")

    files = {"file": ("paste.txt", raw, "text/plain")}
    r = client.post("/arrange/file", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["output"] == "FDT325FAT22-001\tFBB325\tFBB325-3"
    assert data["report"]["summary"]["warnings"] == 1
    assert data["report"]["warnings"][0]["value"] == "contracts=2,old=1,new=2"
    assert "encoding" in data["report"]["normalizations"]

def test_arrange_file_rejects_other_types():
    files = {"file": ("paste.pdf", b"%PDF-1.4", "application/pdf")}
    r = client.post("/arrange/file", files=files)
    assert r.status_code == 422
