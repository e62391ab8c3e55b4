"""Health endpoint reporting whether the task store answers."""

from typing import Dict

from fastapi import Depends, status
from fastapi.responses import JSONResponse

from tasklist_api.app.core.db import Database, StoreError, get_database


async def health(database: Database = Depends(get_database)) -> JSONResponse:
    """Return ``healthy`` (200) if a pooled connection can run ``SELECT 1``, else 503."""
    try:
        await database.ping()
    except StoreError:
        body: Dict[str, str] = {"status": "unhealthy"}
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "healthy"})
