"""
Auror Examination - FastAPI Application Entry Point
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auror_exam import config
from auror_exam.api import game

logging.basicConfig(
    level=config.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Auror Examination",
    description="Text adventure examination for aspiring Aurors",
    version="0.1.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(game.router, prefix="/api/game", tags=["game"])


@app.get("/")
async def root():
    """Health check endpoint"""
    return {"status": "ok", "name": "Auror Examination", "version": "0.1.0"}


@app.get("/api/worlds")
async def list_worlds():
    """List available examination worlds"""
    from auror_exam.engine.world import WorldLoader

    loader = WorldLoader()
    worlds = loader.list_worlds()
    return {"worlds": worlds}
