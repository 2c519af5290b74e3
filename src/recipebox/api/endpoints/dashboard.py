"""Dashboard HTML fragments."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from recipebox.ui import CreateRecipeButton


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/create-recipe-button",
    response_class=HTMLResponse,
    summary="Render the Add Recipe control",
)
async def create_recipe_button(
    import_modal_open: Annotated[bool, Query(alias="import")] = False,
) -> HTMLResponse:
    """Render the Add Recipe control.

    ?import=true renders the import modal already open, which is how the
    Import menu item reloads the fragment.
    """
    button = CreateRecipeButton()
    return HTMLResponse(button.render(import_modal_open=import_modal_open))
