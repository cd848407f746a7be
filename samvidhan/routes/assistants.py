"""
samvidhan/routes/assistants.py
Sector guidance assistants

One POST (guidance) and one GET (directory) route per registered sector
slug, aliases included.
"""
from fastapi import APIRouter, Request

from samvidhan.assistants import REGISTRY
from samvidhan.assistants.base import SectorAssistant
from samvidhan.schemas.assistants import SectorRequest

router = APIRouter(prefix="/api", tags=["Sector Assistants"])


def _guide_endpoint(assistant: SectorAssistant):
    async def guide(payload: SectorRequest):
        return {"success": True, "data": assistant.guide(payload)}
    return guide


def _directory_endpoint(assistant: SectorAssistant):
    async def directory(request: Request):
        params = request.query_params
        data = assistant.directory(params.get("type"), params.get(assistant.location_param))
        return {"success": True, "data": data}
    return directory


for slug, sector in REGISTRY.items():
    router.add_api_route(
        f"/{slug}",
        _guide_endpoint(sector),
        methods=["POST"],
        name=f"{slug}-guide",
        summary=sector.title,
    )
    router.add_api_route(
        f"/{slug}",
        _directory_endpoint(sector),
        methods=["GET"],
        name=f"{slug}-directory",
        summary=sector.title,
    )
