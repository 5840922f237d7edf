import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathways.config import CORS_ORIGINS, LOG_LEVEL
from pathways.data.strata_loader import load_tables
from pathways.errors import add_exception_handlers
from pathways.routers import calculator, reference

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    load_tables()
    yield


app = FastAPI(title="Fertility Pathways API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)

app.include_router(calculator.router, prefix="/api/pathways", tags=["pathways"])
app.include_router(reference.router, prefix="/api/reference", tags=["reference"])


@app.get("/api/health")
async def health():
    return {"status": "ok"}
