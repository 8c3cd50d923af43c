"""Data models for the recipe search cycle.

Recipe mirrors one element of the Spoonacular findByIngredients response.
Only id, image and title are interpreted; every other field the API sends
is kept on the model untouched.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator


class Recipe(BaseModel):
    """Recipe record returned by the search API.

    Fields are optional so that an incomplete record still reaches the grid
    (a missing image shows as a broken image, not an error).
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    image: Optional[str] = None
    title: Optional[str] = None

    @field_validator("image", "title", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> Optional[str]:
        """Render off-type values as text instead of rejecting the record."""
        if value is None or isinstance(value, str):
            return value
        return str(value)


class SearchOutcome(str, Enum):
    """Terminal branch taken by one submit() cycle."""

    REJECTED = "rejected"
    POPULATED = "populated"
    FAILED = "failed"
    STALE = "stale"


_recipe_list = TypeAdapter(List[Recipe])


def parse_recipes(payload: Any) -> List[Recipe]:
    """Interpret a decoded response body as an ordered list of recipes.

    A null body means no results. Anything that is not a JSON array of
    objects raises pydantic.ValidationError.
    """
    if payload is None:
        return []
    return _recipe_list.validate_python(payload)
