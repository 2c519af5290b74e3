"""Recipe retrieval endpoint.

Provides:
- GET /recipes?id=... for a single recipe with ingredients, steps and tags
- GET /recipes for a paginated, filtered and sorted list of visible recipes
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse

from recipebox.api.dependencies import get_household_repository, get_recipe_repository
from recipebox.api.query import RecipeQuery, parse_recipe_query
from recipebox.auth.access import select_access_strategy
from recipebox.auth.dependencies import get_permission_evaluator, get_session_service
from recipebox.auth.permissions import PermissionEvaluator  # noqa: TC001
from recipebox.auth.providers import SessionService  # noqa: TC001
from recipebox.core.config import Settings, get_settings
from recipebox.core.exceptions import (
    AppException,
    ForbiddenException,
    InternalServerException,
    NotFoundException,
    UnauthorizedException,
)
from recipebox.database.repositories import (
    HouseholdRepository,
    RecipeListContext,
    RecipeRepository,
)
from recipebox.observability.logging import get_logger
from recipebox.schemas import RecipeListResponse


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])


@router.get(
    "/recipes",
    summary="Get a recipe or list recipes",
    description=(
        "With ?id= returns one recipe with ingredients, steps and tags. "
        "Otherwise returns a page of recipes visible to the caller. "
        "Supports limit, cursor, search, tags (comma separated), "
        "filterMode (OR/AND) and sortMode (dateDesc/dateAsc/titleAsc/titleDesc)."
    ),
    responses={
        200: {"description": "Recipe or recipe page"},
        401: {"description": "Authentication required"},
        403: {"description": "Recipe not visible to the caller"},
        404: {"description": "Recipe not found"},
        500: {"description": "Internal server error"},
    },
)
async def get_recipes(
    request: Request,
    session_service: Annotated[SessionService, Depends(get_session_service)],
    evaluator: Annotated[PermissionEvaluator, Depends(get_permission_evaluator)],
    recipes: Annotated[RecipeRepository, Depends(get_recipe_repository)],
    households: Annotated[HouseholdRepository, Depends(get_household_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ORJSONResponse:
    """Return one recipe or a page of recipes for the authenticated caller.

    Errors are reported as {"error": message}. Unexpected failures are
    logged and answered with a generic 500 so internals never leak.
    """
    try:
        session = await session_service.get_session(request.headers, request.cookies)
        if session is None:
            raise UnauthorizedException

        user = session.user
        query = parse_recipe_query(request.query_params, settings.pagination)
        logger.debug(
            "Recipe API request received",
            user_id=user.id,
            recipe_id=query.recipe_id,
            limit=query.limit,
            cursor=query.cursor,
        )

        household = await households.get_household_for_user(user.id)
        household_user_ids = household.user_ids if household else None
        context = RecipeListContext(
            user_id=user.id,
            household_user_ids=household_user_ids,
            is_server_admin=user.is_server_admin,
        )

        if query.recipe_id:
            return await _get_recipe_by_id(query.recipe_id, context, recipes, evaluator)
        return await _list_recipes(query, context, recipes)
    except AppException:
        raise
    except Exception as e:
        logger.opt(exception=e).error("GET /api/recipes failed")
        raise InternalServerException from None


async def _get_recipe_by_id(
    recipe_id: str,
    context: RecipeListContext,
    recipes: RecipeRepository,
    evaluator: PermissionEvaluator,
) -> ORJSONResponse:
    logger.debug("Getting recipe by ID", recipe_id=recipe_id)

    recipe = await recipes.get_recipe_full(recipe_id)
    if recipe is None:
        raise NotFoundException("Recipe not found")

    access = select_access_strategy(recipe.user_id, evaluator)
    if not await access.can_view(context):
        logger.warning(
            "Access denied to recipe",
            recipe_id=recipe_id,
            user_id=context.user_id,
            owner_id=recipe.user_id,
        )
        raise ForbiddenException

    return ORJSONResponse(content=recipe.model_dump(mode="json"))


async def _list_recipes(
    query: RecipeQuery,
    context: RecipeListContext,
    recipes: RecipeRepository,
) -> ORJSONResponse:
    logger.debug(
        "Listing recipes",
        user_id=context.user_id,
        limit=query.limit,
        cursor=query.cursor,
        search=query.search,
        tags=query.tags,
        filter_mode=query.filter_mode,
        sort_mode=query.sort_mode,
        has_household=context.household_user_ids is not None,
    )

    result = await recipes.list_recipes(
        context,
        query.limit,
        query.cursor,
        query.search,
        query.tags,
        query.filter_mode,
        query.sort_mode,
    )

    next_offset = query.cursor + query.limit
    next_cursor = next_offset if next_offset < result.total else None

    logger.debug(
        "Listed recipes via API",
        count=len(result.recipes),
        total=result.total,
        next_cursor=next_cursor,
    )

    body = RecipeListResponse(
        recipes=result.recipes,
        total=result.total,
        next_cursor=next_cursor,
    )
    return ORJSONResponse(content=body.model_dump(mode="json"))
