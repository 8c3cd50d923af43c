"""Recipe Finder - Streamlit single-page UI.

Enter a comma-separated ingredient list, press "Find Recipes", and the page
shows up to five matching recipes from Spoonacular as an image/title grid.

Run with: streamlit run app.py
"""

import asyncio

import streamlit as st

from src.controllers.search import SearchController
from src.ui.renderer import render_recipe_grid
from src.utils.config import config
from src.utils.logger import logger

CONTROLLER_KEY = "search_controller"
INPUT_PLACEHOLDER = "Enter your ingredients (comma-separated)..."


def get_controller() -> SearchController:
    """Return this browser session's controller, creating it on first run."""
    if CONTROLLER_KEY not in st.session_state:
        logger.info("Starting new Recipe Finder session")
        st.session_state[CONTROLLER_KEY] = SearchController(config)
    return st.session_state[CONTROLLER_KEY]


def main() -> None:
    st.set_page_config(page_title="Recipe Finder", page_icon="🍳")
    controller = get_controller()

    st.title("Recipe Finder")

    ingredients = st.text_area(
        "Ingredients",
        height=150,
        placeholder=INPUT_PLACEHOLDER,
        label_visibility="collapsed",
        key="ingredients",
    )
    controller.set_query(ingredients)

    if st.button("Find Recipes"):
        with st.spinner("Searching recipes..."):
            asyncio.run(controller.submit())

    if controller.error:
        st.error(controller.error)

    grid = render_recipe_grid(controller.recipes)
    if grid:
        st.markdown(grid, unsafe_allow_html=True)


main()
