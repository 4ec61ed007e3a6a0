import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI

from receiptd.api.endpoints.documents import router as documents_router
from receiptd.api.middleware import setup_cors

logging.basicConfig(level=os.getenv("RECEIPTD_LOG_LEVEL", "INFO").upper())

app = FastAPI(
    title="receiptd",
    description="Renders point-of-sale notification emails as invoices, receipts and quotes",
    version="1.0.0",
)

setup_cors(app)
app.include_router(documents_router, prefix="/api")


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "service": "receiptd",
        "python_version": sys.version.split()[0],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
