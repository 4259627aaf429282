"""
Chat endpoints.

Forwards a chat message to OpenAI and returns the reply text.
"""
import json

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from chat_proxy.api.dependencies.providers import get_chat_controller
from chat_proxy.api.models import ErrorResponse
from chat_proxy.controllers.chat_controller import ChatController
from chat_proxy.errors import ClientInputError

# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        403: {"model": ErrorResponse, "description": "Origin not allowed"},
        413: {"model": ErrorResponse, "description": "Request body too large"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Provider unreachable"},
        502: {"model": ErrorResponse, "description": "No text returned"},
    },
)
@router.post("/api/chat", include_in_schema=False)
async def chat(
    request: Request,
    controller: ChatController = Depends(get_chat_controller),
) -> JSONResponse:
    """
    Chat endpoint.

    Accepts the request shape of the deployment's chat mode, forwards it to
    OpenAI and returns ``{"reply" | "text": <reply>}``. Provider errors keep
    the provider's status code.
    """
    body = await _read_json(request)
    result = await controller.chat(body)

    if isinstance(result, str):
        return JSONResponse({controller.settings.resolved_reply_key: result})
    return JSONResponse(result)


async def _read_json(request: Request):
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ClientInputError("Request body must be a JSON object") from e
