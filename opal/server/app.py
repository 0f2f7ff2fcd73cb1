#!/usr/bin/env python3
"""
Opal FastAPI Server
Provides REST API for previewing and applying contract augmentations
"""
import os
from typing import Optional, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from opal import __version__
from opal.core.augmenter import augment, augment_file
from opal.core.errors import AugmentationError, UnknownProfile
from opal.locator import parse_document
from opal.profiles import PROFILE_CATALOG, get_profile, list_profiles


# ============================================================================
# Request/Response Models
# ============================================================================

class AugmentRequest(BaseModel):
    file_path: str
    profile: str
    output_dir: Optional[str] = None
    dry_run: bool = False


class PreviewRequest(BaseModel):
    source: str
    profile: str


class AugmentResponse(BaseModel):
    success: bool
    result: Optional[dict] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    profiles: List[str]


class ProfilesResponse(BaseModel):
    profiles: List[dict]


def result_to_dict(result, include_source: bool = False) -> dict:
    data = {
        "contract": result.document.name,
        "capabilities": list(result.document.capabilities),
        "output_path": result.output_path,
        "base_path": result.base_path,
        "profile": result.profile_family
    }
    if include_source:
        data["source"] = result.text
    return data


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Opal API",
    description="Contract augmentation API for WSTON-backed token projects",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return {
        "status": "ok",
        "version": __version__,
        "profiles": sorted(PROFILE_CATALOG)
    }


@app.get("/api/profiles", response_model=ProfilesResponse)
async def profiles():
    """List the augmentation profiles of the catalog"""
    return {"profiles": [p.summary() for p in list_profiles()]}


@app.post("/api/augment", response_model=AugmentResponse)
async def augment_contract(request: AugmentRequest):
    """
    Augment a base contract file on the server's filesystem.

    Example:
        POST /api/augment
        {
            "file_path": "contracts/NFTFactory.sol",
            "profile": "erc721",
            "dry_run": false
        }
    """
    if not os.path.exists(request.file_path):
        raise HTTPException(status_code=404, detail="File not found")

    try:
        result = augment_file(
            request.file_path,
            request.profile,
            output_dir=request.output_dir,
            write=not request.dry_run
        )
    except (AugmentationError, UnknownProfile) as e:
        return {
            "success": False,
            "error": str(e)
        }

    return {
        "success": True,
        "result": result_to_dict(result, include_source=request.dry_run)
    }


@app.post("/api/preview", response_model=AugmentResponse)
async def preview(request: PreviewRequest):
    """
    Compose a derived contract from source text without touching the disk.

    Example:
        POST /api/preview
        {
            "source": "contract Foo is ERC721 { ... }",
            "profile": "erc721"
        }
    """
    try:
        profile = get_profile(request.profile)
        result = augment(parse_document(request.source), profile)
    except (AugmentationError, UnknownProfile) as e:
        return {
            "success": False,
            "error": str(e)
        }

    return {
        "success": True,
        "result": result_to_dict(result, include_source=True)
    }


# ============================================================================
# Run Server
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    print("=" * 60)
    print("Opal API Server")
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("API docs: http://localhost:8000/docs")
    print("=" * 60)

    uvicorn.run(app, host="0.0.0.0", port=8000)
