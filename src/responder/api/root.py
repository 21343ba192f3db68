"""Root router: the responder's only endpoint."""

from fastapi import APIRouter

from responder.schemas.payload import ResponsePayload
from responder.services.payload import build_payload

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], response_model=ResponsePayload)
async def root() -> ResponsePayload:
    """Return the responder payload with a per-request instance id and timestamp.

    HEAD is served alongside GET; other methods fall through to the
    framework's 405 response.
    """
    return build_payload()
