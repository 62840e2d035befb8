"""
FastAPI Endpoints for the Visit Logger Service

Endpoints only handle:
- Resolving the shared database client
- Error handling and HTTP responses
- Delegating to the service layer

GET / records a visit, then lists the most recent ones as plain text. Any
database failure becomes an HTTP 500 whose detail carries the original
error text.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from visitlog.core.exceptions import DatabaseError
from visitlog.db.interface import DatabaseClient
from visitlog.middleware.logging import get_client_ip
from visitlog.services.visit_logger import VisitLoggerService, render_visits

logger = logging.getLogger(__name__)

router = APIRouter()


def get_database_client(request: Request) -> DatabaseClient:
    """Dependency returning the client created at startup."""
    return request.app.state.db_client


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Record a visit and list recent visits",
    description="Stores the current visit and returns the last 10 visits as plain text"
)
async def record_visit(
    request: Request,
    client: DatabaseClient = Depends(get_database_client)
) -> PlainTextResponse:
    """
    Record a visit and render the most recent visits.

    Returns:
        PlainTextResponse (HTTP 200) listing the last 10 visits

    Raises:
        HTTPException 500: If recording or reading visits fails
    """
    visit_logger = VisitLoggerService(client)

    try:
        await visit_logger.log_visit(get_client_ip(request))
        visits = await visit_logger.get_recent_visits()
    except DatabaseError as e:
        logger.error(str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return PlainTextResponse(render_visits(visits), status_code=status.HTTP_200_OK)
