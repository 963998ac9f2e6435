from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .routers import digital, formulas, shared_quotes

# Root handlers belong to the server (uvicorn); only the package level is set here
logger = logging.getLogger("pouchquote")
logger.setLevel(settings.LOG_LEVEL.upper())

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Pouch Quoting App",
    description=f"Digital-print flexible pouch quoting for {settings.COMPANY_NAME}",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(digital.router, prefix="/api")
app.include_router(formulas.router, prefix="/api")
app.include_router(shared_quotes.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "pouch-quoting-app"}
