"""Development-host endpoints for driving the logical clock."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

router = APIRouter(tags=["admin"])


@router.post("/blocks/{count}")
async def mine_blocks(count: int, request: Request) -> dict:
    """Advance the in-memory height by ``count`` blocks."""
    if count < 0:
        raise HTTPException(status_code=422, detail="count must be non-negative")
    height = request.app.state.height_source.mine_blocks(count)
    return {"height": height}


@router.get("/height")
async def current_height(request: Request) -> dict:
    return {"height": request.app.state.height_source.current_height()}
