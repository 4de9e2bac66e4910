"""Top-level file passthroughs — sw.js, schedule.json, site verification."""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from devsummit.config import SCHEDULE_PATH, SITE_ROOT, VERIFICATION_FILE


def _send(path: Path) -> FileResponse:
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path)


def build_router(source_prefix: str, site_root: Path = SITE_ROOT) -> APIRouter:
    """Routes serving single files from the site root.

    The service worker is served from the top level so its scope covers the
    whole site, out of ``res/`` in prod and ``src/`` otherwise.
    """
    router = APIRouter()

    @router.get("/sw.js", include_in_schema=False)
    async def service_worker():
        return _send(site_root / source_prefix / "sw.js")

    @router.get("/schedule.json", include_in_schema=False)
    async def schedule_json():
        return _send(site_root / SCHEDULE_PATH.name)

    @router.get(f"/{VERIFICATION_FILE}", include_in_schema=False)
    async def verification():
        return _send(site_root / VERIFICATION_FILE)

    return router
