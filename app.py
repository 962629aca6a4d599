from __future__ import annotations
from fastapi import FastAPI
from mrelbp.api.routers_descriptors import router as descriptors_router

app = FastAPI(title="MRELBP Texture Descriptor API", version="0.1.0")

app.include_router(descriptors_router)

@app.get('/health')
async def health():
    return {"status": "ok"}
