"""Recipe data repository.

Read-only access to recipes stored in PostgreSQL. List queries apply the
recipe view policy in SQL so that pagination totals only count recipes the
caller may see.

Tables used:
- recipes(id, name, description, image, url, servings, prep_minutes,
  cook_minutes, total_minutes, user_id, created_at, updated_at)
- tags(id, name) and recipe_tags(recipe_id, tag_id)
- ingredients(id, name) and recipe_ingredients(id, recipe_id, ingredient_id,
  amount, unit, system_used, "order")
- steps(id, recipe_id, step, system_used, "order")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from recipebox.core.config import AccessLevel, RecipePermissionPolicy, get_settings
from recipebox.database.connection import get_database_pool
from recipebox.observability.logging import get_logger
from recipebox.schemas.enums import FilterMode, SortOrder
from recipebox.schemas.recipe import (
    FullRecipe,
    RecipeDashboard,
    RecipeIngredient,
    RecipeListResult,
    RecipeStep,
    RecipeTag,
)


if TYPE_CHECKING:
    from asyncpg import Pool, Record

logger = get_logger(__name__)


_RECIPE_COLUMNS: Final[str] = """
    r.id::text AS id,
    r.name,
    r.description,
    r.image,
    r.url,
    r.servings,
    r.prep_minutes,
    r.cook_minutes,
    r.total_minutes,
    r.user_id::text AS user_id,
    r.created_at,
    r.updated_at
"""

SORT_CLAUSES: Final[dict[SortOrder, str]] = {
    SortOrder.DATE_DESC: "r.created_at DESC, r.id DESC",
    SortOrder.DATE_ASC: "r.created_at ASC, r.id ASC",
    SortOrder.TITLE_ASC: "lower(r.name) ASC, r.id ASC",
    SortOrder.TITLE_DESC: "lower(r.name) DESC, r.id DESC",
}


@dataclass(frozen=True, slots=True)
class RecipeListContext:
    """Who is listing recipes. Built per request and discarded after."""

    user_id: str
    household_user_ids: list[str] | None
    is_server_admin: bool


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_list_filters(
    context: RecipeListContext,
    policy: RecipePermissionPolicy,
    search: str | None = None,
    tags: list[str] | None = None,
    filter_mode: FilterMode = FilterMode.OR,
) -> tuple[str, list[Any]]:
    """Build the WHERE clause and positional parameters for a recipe list.

    Returns:
        (clause, params) where clause references params as $1..$n.
    """
    clauses: list[str] = []
    params: list[Any] = []

    def add_param(value: Any) -> str:
        params.append(value)
        return f"${len(params)}"

    if not context.is_server_admin and policy.view != AccessLevel.EVERYONE:
        if policy.view == AccessLevel.HOUSEHOLD and context.household_user_ids:
            owners = sorted({*context.household_user_ids, context.user_id})
        else:
            owners = [context.user_id]
        ref = add_param(owners)
        clauses.append(f"(r.user_id IS NULL OR r.user_id::text = ANY({ref}::text[]))")

    if search:
        ref = add_param(f"%{_escape_like(search)}%")
        clauses.append(f"r.name ILIKE {ref}")

    if tags:
        wanted = sorted({tag.lower() for tag in tags})
        ref = add_param(wanted)
        tag_match = (
            "FROM recipe_tags rt JOIN tags t ON t.id = rt.tag_id "
            f"WHERE rt.recipe_id = r.id AND lower(t.name) = ANY({ref}::text[])"
        )
        if filter_mode == FilterMode.AND:
            count_ref = add_param(len(wanted))
            clauses.append(
                f"(SELECT count(DISTINCT lower(t.name)) {tag_match}) = {count_ref}"
            )
        else:
            clauses.append(f"EXISTS (SELECT 1 {tag_match})")

    return (" AND ".join(clauses) or "TRUE"), params


class RecipeRepository:
    """Repository for recipe reads.

    Uses raw asyncpg queries. The view policy defaults to the configured
    recipe permission policy.
    """

    def __init__(
        self,
        pool: Pool | None = None,
        policy: RecipePermissionPolicy | None = None,
    ) -> None:
        self._pool = pool
        self._policy = policy

    @property
    def pool(self) -> Pool:
        """Get the database connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    @property
    def policy(self) -> RecipePermissionPolicy:
        if self._policy is not None:
            return self._policy
        return get_settings().permissions.recipes

    async def list_recipes(
        self,
        context: RecipeListContext,
        limit: int,
        cursor: int,
        search: str | None = None,
        tags: list[str] | None = None,
        filter_mode: FilterMode = FilterMode.OR,
        sort_mode: SortOrder = SortOrder.DATE_DESC,
    ) -> RecipeListResult:
        """Return one page of visible recipes and the total matching count.

        Args:
            context: Requesting user, household members and admin flag.
            limit: Page size.
            cursor: Offset into the sorted result set.
            search: Case-insensitive substring match on the recipe name.
            tags: Tag names to filter by.
            filter_mode: OR matches any tag, AND requires all of them.
            sort_mode: Result ordering.
        """
        where, params = build_list_filters(
            context, self.policy, search, tags, filter_mode
        )
        limit_ref = f"${len(params) + 1}"
        offset_ref = f"${len(params) + 2}"

        page_query = f"""
            SELECT
                {_RECIPE_COLUMNS},
                COALESCE(
                    (
                        SELECT array_agg(t.name ORDER BY t.name)
                        FROM recipe_tags rt
                        JOIN tags t ON t.id = rt.tag_id
                        WHERE rt.recipe_id = r.id
                    ),
                    '{{}}'
                ) AS tags
            FROM recipes r
            WHERE {where}
            ORDER BY {SORT_CLAUSES[SortOrder(sort_mode)]}
            LIMIT {limit_ref} OFFSET {offset_ref}
        """  # noqa: S608 - clauses are built from fixed fragments
        count_query = f"SELECT count(*) FROM recipes r WHERE {where}"  # noqa: S608

        async with self.pool.acquire() as conn:
            rows = await conn.fetch(page_query, *params, limit, cursor)
            total = await conn.fetchval(count_query, *params)

        return RecipeListResult(
            recipes=[self._row_to_dashboard(row) for row in rows],
            total=int(total or 0),
        )

    async def get_recipe_full(self, recipe_id: str) -> FullRecipe | None:
        """Load a recipe with its ingredients, steps and tags.

        Returns:
            FullRecipe if found, None otherwise.
        """
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {_RECIPE_COLUMNS} FROM recipes r "  # noqa: S608
                "WHERE r.id::text = $1",
                recipe_id,
            )
            if row is None:
                return None

            ingredient_rows = await conn.fetch(
                """
                SELECT
                    ri.id::text AS id,
                    i.name AS ingredient_name,
                    ri.amount,
                    ri.unit,
                    ri.system_used,
                    ri."order"
                FROM recipe_ingredients ri
                JOIN ingredients i ON i.id = ri.ingredient_id
                WHERE ri.recipe_id::text = $1
                ORDER BY ri."order"
                """,
                recipe_id,
            )
            step_rows = await conn.fetch(
                """
                SELECT step, system_used, "order"
                FROM steps
                WHERE recipe_id::text = $1
                ORDER BY "order"
                """,
                recipe_id,
            )
            tag_rows = await conn.fetch(
                """
                SELECT t.name
                FROM recipe_tags rt
                JOIN tags t ON t.id = rt.tag_id
                WHERE rt.recipe_id::text = $1
                ORDER BY t.name
                """,
                recipe_id,
            )

        return FullRecipe(
            **dict(row),
            ingredients=[RecipeIngredient(**dict(r)) for r in ingredient_rows],
            steps=[RecipeStep(**dict(r)) for r in step_rows],
            tags=[RecipeTag(name=r["name"]) for r in tag_rows],
        )

    @staticmethod
    def _row_to_dashboard(row: Record) -> RecipeDashboard:
        data = dict(row)
        data["tags"] = list(data.get("tags") or [])
        return RecipeDashboard(**data)
