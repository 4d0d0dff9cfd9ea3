"""
FastAPI app for Shiftview.

HTTP layer over the schedule use cases (grouping, classification, range filter).
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shiftview.api.router import router
from shiftview.application.config import CORS_ORIGINS

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Shiftview API",
    description="Planned vs actual shifts: late arrivals, early leaves, absences",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
def root():
    """Root endpoint"""
    return {"message": "Shiftview API", "status": "ok"}


# Run with uvicorn
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
