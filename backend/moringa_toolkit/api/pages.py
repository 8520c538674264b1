from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

# Inline HTML for demonstration
INDEX_HTML = "<h1>Hello, Moringa — Ruby & Sinatra Toolkit</h1>\n<p>This page proves Sinatra is running.</p>"


@router.get("/", response_class=HTMLResponse, summary="Landing page")
async def index() -> HTMLResponse:
    return HTMLResponse(content=INDEX_HTML)
