"""HTML rendering of the recipe result grid.

render_recipe_grid() is a pure function of the result list. The Streamlit
page injects its output with st.markdown(..., unsafe_allow_html=True);
all recipe text is escaped before it is placed in the markup.
"""

from html import escape
from typing import Sequence

from src.models.models import Recipe

GRID_HEADING = "Suggested Recipes:"

GRID_STYLE = "display: flex; flex-wrap: wrap; gap: 20px; list-style: none; padding: 0;"
CARD_STYLE = (
    "text-align: center; width: 200px; padding: 10px; border: 1px solid #ddd; "
    "border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1);"
)
IMAGE_STYLE = "width: 100%; height: 150px; object-fit: cover; border-radius: 4px; margin-bottom: 8px;"


def render_recipe_card(position: int, recipe: Recipe) -> str:
    """Render one card. position is a display key only."""
    title = escape(recipe.title or "")
    image = escape(recipe.image or "", quote=True)
    return (
        f'<div class="recipe-card" data-key="{position}" style="{CARD_STYLE}">'
        f'<img src="{image}" alt="{title}" style="{IMAGE_STYLE}" />'
        f"<strong>{title}</strong>"
        f"</div>"
    )


def render_recipe_grid(recipes: Sequence[Recipe]) -> str:
    """Render the result grid for the given recipes, in order.

    Args:
        recipes: Current result list.

    Returns:
        HTML fragment with heading and one card per recipe, or an empty
        string when there are no recipes.
    """
    if not recipes:
        return ""

    cards = "".join(render_recipe_card(position, recipe) for position, recipe in enumerate(recipes))
    return (
        f'<div class="recipe-results" style="margin-top: 20px;">'
        f"<h3>{GRID_HEADING}</h3>"
        f'<div class="recipe-grid" style="{GRID_STYLE}">{cards}</div>'
        f"</div>"
    )
