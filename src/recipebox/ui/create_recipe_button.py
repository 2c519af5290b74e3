"""Dashboard "Add Recipe" control.

Two variants share the same menu: a labelled button for wide screens and
an icon-only button for narrow ones. Import opens the import modal, Create
links to the new-recipe page. Whether the modal is open is the only state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from jinja2 import Environment, FileSystemLoader, select_autoescape


TEMPLATE_DIR: Final[Path] = Path(__file__).parent / "templates"

TEMPLATES = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(),
)


@dataclass(frozen=True, slots=True)
class MenuAction:
    key: str
    label: str
    href: str
    icon: str


class CreateRecipeButton:
    def __init__(
        self,
        *,
        environment: Environment = TEMPLATES,
        template_name: str = "create_recipe_button.html",
        fragment_url: str = "/dashboard/create-recipe-button",
        create_url: str = "/recipes/new",
    ) -> None:
        self.env = environment
        self.name = template_name
        self.fragment_url = fragment_url
        self.create_url = create_url

    @property
    def menu_label(self) -> str:
        return "Add recipe options"

    @property
    def actions(self) -> list[MenuAction]:
        return [
            MenuAction(
                key="import",
                label="Import",
                href=f"{self.fragment_url}?import=true",
                icon="arrow-down-tray",
            ),
            MenuAction(key="create", label="Create", href=self.create_url, icon="plus"),
        ]

    @property
    def close_url(self) -> str:
        return f"{self.fragment_url}?import=false"

    def render(self, *, import_modal_open: bool = False) -> str:
        return self.env.get_template(self.name).render(
            button=self,
            import_modal_open=import_modal_open,
        )
