"""Spoonacular recipe search client.

This module provides the SpoonacularClient class that performs the
findByIngredients request and collapses every failure mode into a single
RecipeFetchError so callers only have one exception to handle.
"""

import asyncio
import json
from typing import Optional

import aiohttp
from pydantic import ValidationError

from src.models.models import Recipe, parse_recipes
from src.utils.logger import logger

FIND_BY_INGREDIENTS_PATH = "/recipes/findByIngredients"

# Results requested per search
RESULT_LIMIT = 5


class RecipeFetchError(RuntimeError):
    """Raised when a recipe search cannot produce a result list.

    The underlying cause (network error, HTTP status, bad body) is chained
    as __cause__.
    """


class SpoonacularClient:
    """Issue ingredient searches against the Spoonacular API.

    One aiohttp session is opened per request. No retries are attempted.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.spoonacular.com",
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize SpoonacularClient.

        Args:
            api_key: Spoonacular API key, may be empty (request will then fail upstream).
            base_url: API root without trailing slash.
            timeout: Total request timeout in seconds. None disables it.
        """
        if not api_key:
            logger.warning("SPOONACULAR_API_KEY is not set, recipe searches will be rejected by the API")

        self.api_key = api_key
        self.url = base_url.rstrip("/") + FIND_BY_INGREDIENTS_PATH
        self.timeout = timeout

    def build_params(self, ingredients: str) -> dict[str, str | int]:
        """Query parameters for a search. Ingredients are sent exactly as typed."""
        return {
            "ingredients": ingredients,
            "number": RESULT_LIMIT,
            "apiKey": self.api_key,
        }

    async def find_by_ingredients(self, ingredients: str) -> list[Recipe]:
        """Search recipes that use the given comma-separated ingredients.

        Args:
            ingredients: Raw ingredient text, parsed server-side.

        Returns:
            Recipes in API order. Empty list when the body is null or an empty array.

        Raises:
            RecipeFetchError: On network failure, non-2xx status, or a body
                that is not a JSON array of objects.
        """
        # apiKey deliberately left out of the log line
        logger.info(f"GET {self.url} ingredients={ingredients!r} number={RESULT_LIMIT}")

        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.get(self.url, params=self.build_params(ingredients)) as response:
                    response.raise_for_status()
                    payload = await response.json(content_type=None)
        except aiohttp.ClientResponseError as e:
            raise RecipeFetchError(f"Recipe search returned HTTP {e.status}: {e.message}") from e
        except aiohttp.ClientError as e:
            raise RecipeFetchError(f"Recipe search request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise RecipeFetchError(f"Recipe search timed out after {self.timeout}s") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RecipeFetchError(f"Recipe search returned invalid JSON: {e}") from e

        try:
            recipes = parse_recipes(payload)
        except ValidationError as e:
            raise RecipeFetchError(f"Recipe search returned unexpected body: {e.error_count()} validation error(s)") from e

        logger.debug(f"Recipe search returned {len(recipes)} recipe(s)")
        return recipes
