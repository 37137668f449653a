"""Outermost HTTP middleware: CORS headers and last-resort error responses."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


class CorsMiddleware(BaseHTTPMiddleware):
    """Answers every preflight and stamps permissive CORS headers on all responses.

    Uncaught exceptions end here as ``500 {"error": str(exc)}`` so browser
    clients can still read the body.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(
                status_code=500,
                content={"error": str(exc) or "Unknown error"},
            )

        response.headers.update(CORS_HEADERS)
        return response
