"""Long-poll endpoint the page script uses to decide when to reload."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from mdlive.api.deps import get_poller
from mdlive.reload import ReloadAnswer, ReloadPoller

router = APIRouter()


@router.get("/update", response_class=PlainTextResponse)
async def check_for_update(
    poller: Annotated[ReloadPoller, Depends(get_poller)],
) -> ReloadAnswer:
    """Block until the served file changes or the poll window runs out.

    Responds with plain text "yes" or "no".
    """
    return await poller.check_for_change()
