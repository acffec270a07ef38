from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import ArrangeRequest, ArrangeResponse, HealthResponse
from .normalize import arrange_payload, decode_text
from .rules import UPLOAD_EXTENSIONS

app = FastAPI(
    title="zone-arranger",
    description="Deterministic arrangement of pasted contract / zone transfer data",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/arrange", response_model=ArrangeResponse)
def arrange(body: ArrangeRequest):
    return arrange_payload(body.text)

@app.post("/arrange/file", response_model=ArrangeResponse)
async def arrange_file(file: UploadFile = File(...)):
    if not (file.filename or "").lower().endswith(UPLOAD_EXTENSIONS):
        raise HTTPException(status_code=422, detail="Only .txt, .tsv or .csv files are supported")

    raw = await file.read()
    text, decoding = decode_text(raw)
    return arrange_payload(text, decoding)
