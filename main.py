from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from admissions.config import get_settings
from admissions.routes import router as recommendations_router

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logging.info("App starting with catalog %s", settings.catalog_path or "<built-in sample>")

app = FastAPI(title="Admission Odds", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendations_router)


@app.get("/", tags=["meta"])
def root():
    return {"service": "admission-odds", "docs": "/docs"}
