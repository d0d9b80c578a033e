#!/usr/bin/env python3
"""
Keyword Sentiment Analyzer - HTTP dashboard backend
FastAPI application with real-time WebSocket updates
"""

import asyncio
import os
from datetime import datetime, UTC
from typing import Dict, List, Any

import uvicorn
from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import Config, get_config, subscribe_to_updates
from services.history import HISTORY_CAPACITY, HistoryTracker
from services.logging_utils import get_logger
from services.observability import (
    elapsed,
    metrics_router,
    record_analysis,
    record_request_metrics,
    request_timer,
)
from services.samples import SAMPLE_TEXTS, random_sample
from services.sentiment import EmptyInputError, SentimentService

# Initialize logger
logger = get_logger(__name__)

# Global state
config = get_config()
sentiment_service = SentimentService()
tracker = HistoryTracker(time_format=config.HISTORY_TIME_FORMAT)

def apply_config_changes(cfg: Config, changes: Dict[str, Any]):
    """Push runtime config changes into the live tracker"""
    if "HISTORY_TIME_FORMAT" in changes or "__reset__" in changes:
        tracker.time_format = cfg.HISTORY_TIME_FORMAT
        logger.info(f"History time format set to {cfg.HISTORY_TIME_FORMAT!r}")

subscribe_to_updates(apply_config_changes)

# Initialize FastAPI app
app = FastAPI(
    title="Keyword Sentiment Analyzer",
    description="Lexical sentiment classification with a rolling history",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(metrics_router)

# WebSocket connections for real-time updates
websocket_connections: List[WebSocket] = []

# Pydantic models for API
class AnalyzeRequest(BaseModel):
    text: str

@app.middleware("http")
async def observe_requests(request: Request, call_next):
    start = request_timer()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        record_request_metrics(request, status_code, elapsed(start))

# WebSocket endpoint for real-time updates
@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()
    websocket_connections.append(websocket)
    logger.info("WebSocket connection established")

    try:
        while True:
            # Keep connection alive
            await asyncio.sleep(30)
            await websocket.send_text("ping")
    except WebSocketDisconnect:
        logger.info("WebSocket connection closed")
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        if websocket in websocket_connections:
            websocket_connections.remove(websocket)

# Broadcast updates to all connected clients
async def broadcast_update(data: Dict[str, Any]):
    if not websocket_connections:
        return

    disconnected = []
    for websocket in websocket_connections:
        try:
            await websocket.send_json(data)
        except Exception as e:
            logger.error(f"Failed to send WebSocket update: {e}")
            disconnected.append(websocket)

    # Remove disconnected clients
    for ws in disconnected:
        websocket_connections.remove(ws)

@app.post("/api/analyze")
async def analyze_text(request: AnalyzeRequest):
    """Classify text, record it in the history and return the updated view"""
    text = request.text.strip()
    if not text:
        raise HTTPException(status_code=400, detail="Please enter some text to analyze!")

    delay_ms = get_config().ANALYZE_DELAY_MS
    if delay_ms > 0:
        # Simulated latency so the dashboard can show its loading state
        await asyncio.sleep(delay_ms / 1000)

    try:
        start = request_timer()
        result = sentiment_service.analyze_sentiment(text)
        record_analysis(result, elapsed(start))
        entry = tracker.record(text, result)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Analysis error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    payload = {
        "result": result.to_dict(),
        "entry": entry.to_dict(),
        "stats": tracker.stats.as_dict(),
    }
    await broadcast_update({"type": "analysis", **payload})
    return payload

@app.get("/api/stats")
async def get_stats():
    """Get cumulative counts per sentiment"""
    return tracker.stats.as_dict()

@app.get("/api/history")
async def get_history():
    """Get recent analyses, newest first"""
    return [entry.to_dict() for entry in tracker.history]

@app.get("/api/samples")
async def get_samples():
    """Get the demo sample texts"""
    return {"samples": list(SAMPLE_TEXTS)}

@app.get("/api/samples/random")
async def get_random_sample():
    """Get one demo sample text"""
    return {"text": random_sample()}

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"ok": True, "timestamp": datetime.now(UTC).isoformat()}

@app.on_event("startup")
async def startup_event():
    logger.info(
        f"Starting Keyword Sentiment Analyzer ({get_config().APP_ENV}), "
        f"history limit {HISTORY_CAPACITY}"
    )

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Keyword Sentiment Analyzer...")

if __name__ == "__main__":
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=config.PORT,
        reload=os.getenv("APP_ENV") == "development"
    )
