from fastapi import APIRouter
from ..schemas.hello import HelloResponse
from datetime import datetime

router = APIRouter(tags=["hello"])

HELLO_MESSAGE = "Hello from Ruby API"

@router.get("/hello", response_model=HelloResponse, summary="Hello with server time")
async def hello() -> HelloResponse:
    """
    Greeting endpoint carrying the current server time.

    Returns:
        HelloResponse: fixed message and a timezone-aware local timestamp
    """
    return HelloResponse(message=HELLO_MESSAGE, time=datetime.now().astimezone())
