# server.py
import os
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ciphers import (PRESETS, CharRange, CipherError, InvalidOperation,
                     OPERATIONS, preset, run_operation)

from dotenv import load_dotenv
load_dotenv()

DEFAULT_RANGE_NAME = os.getenv("CIPHER_DEFAULT_RANGE", "upper")

if DEFAULT_RANGE_NAME.lower() not in PRESETS:
    print(f"!!! WARNING: unknown CIPHER_DEFAULT_RANGE {DEFAULT_RANGE_NAME!r}, using 'upper' !!!")
    DEFAULT_RANGE_NAME = "upper"
else:
    print(f"Server default range: {DEFAULT_RANGE_NAME} {preset(DEFAULT_RANGE_NAME)}")

DEFAULT_RANGE = preset(DEFAULT_RANGE_NAME)

app = FastAPI(title="RangeCipher", version="1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)

# --- Schemas ---
class CipherReq(BaseModel):
    key: Union[int, str] = Field(..., description="integer shift (Caesar) or key string (Vigenère)")
    text: str
    range: Optional[str] = Field(None, description="preset name: upper, lower, digits, printable")
    range_low: Optional[str] = Field(None, min_length=1, max_length=1)
    range_high: Optional[str] = Field(None, min_length=1, max_length=1)

class CipherResp(BaseModel):
    operation: str
    range_low: str
    range_high: str
    text: str

class RangeInfo(BaseModel):
    name: str
    low: str
    high: str
    size: int

# --- Helpers ---
def _resolve_range(body: CipherReq) -> CharRange:
    if body.range_low is not None or body.range_high is not None:
        if body.range_low is None or body.range_high is None:
            raise HTTPException(400, "range_low and range_high must be given together")
        try:
            return CharRange.of(body.range_low, body.range_high)
        except CipherError as e:
            raise HTTPException(400, str(e))
    if body.range is not None:
        try:
            return preset(body.range)
        except CipherError as e:
            raise HTTPException(400, str(e))
    return DEFAULT_RANGE

# --- Routes: info ---
@app.get("/")
def welcome():
    return {
        "service": app.title,
        "version": app.version,
        "default_range": DEFAULT_RANGE_NAME,
        "operations": list(OPERATIONS),
    }

@app.get("/api/ranges", response_model=list[RangeInfo])
def list_ranges():
    return [RangeInfo(name=name, low=chr(r.low), high=chr(r.high), size=r.size)
            for name, r in PRESETS.items()]

# --- Routes: transform ---
@app.post("/api/{operation}", response_model=CipherResp)
def transform(operation: str, body: CipherReq):
    """Run one of caesar-encrypt, caesar-decrypt, vigenere-encrypt, vigenere-decrypt."""
    if operation not in OPERATIONS:
        raise HTTPException(404, f"unknown operation {operation!r}")
    rng = _resolve_range(body)
    try:
        text = run_operation(operation, rng.low, rng.high, body.key, body.text)
    except InvalidOperation as e:
        raise HTTPException(404, str(e))
    except CipherError as e:
        raise HTTPException(400, str(e))
    return CipherResp(operation=operation, range_low=chr(rng.low),
                      range_high=chr(rng.high), text=text)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("CIPHER_HOST", "0.0.0.0"),
                port=int(os.getenv("CIPHER_PORT", "8000")))
