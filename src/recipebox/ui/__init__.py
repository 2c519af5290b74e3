"""Server-rendered dashboard fragments."""

from recipebox.ui.create_recipe_button import CreateRecipeButton, MenuAction


__all__ = ["CreateRecipeButton", "MenuAction"]
