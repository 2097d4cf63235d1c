"""Rendered markdown page and its stylesheet."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from mdlive.api.deps import get_config
from mdlive.config import ServerConfig
from mdlive.render import load_stylesheet, render_page

router = APIRouter()


@router.get("/style.css")
async def stylesheet() -> Response:
    """Serve the bundled markdown stylesheet."""
    return Response(content=load_stylesheet(), media_type="text/css")


@router.get("/{path:path}", response_class=HTMLResponse)
def markdown_page(
    path: str,
    config: Annotated[ServerConfig, Depends(get_config)],
) -> str:
    """Render the served file. Every path not matched elsewhere lands here."""
    return render_page(config.markdown_file, config.poll_window)
