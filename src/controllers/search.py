"""Search controller: owns the query, result and error state of the page.

The controller is UI-framework agnostic. The Streamlit page keeps one
instance per browser session and calls set_query() on every input change
and submit() when the search button is pressed.

State invariant: either recipes is non-empty and error is empty, or
recipes is empty. Every write site below clears or sets both.
"""

from typing import Optional

from src.clients.spoonacular import RecipeFetchError, SpoonacularClient
from src.models.models import Recipe, SearchOutcome
from src.utils.config import Config
from src.utils.logger import logger

EMPTY_INPUT_MESSAGE = "Please enter some ingredients."
FETCH_FAILED_MESSAGE = "Failed to fetch recipes. Please try again."


class SearchController:
    """Drive one ingredient search per submit() and expose the resulting state."""

    def __init__(self, config: Config, client: Optional[SpoonacularClient] = None) -> None:
        """Initialize controller with empty state.

        Args:
            config: Process-wide configuration, read once here.
            client: Search client. Built from config when omitted.
        """
        self.config = config
        self.client = client or SpoonacularClient(
            api_key=config.SPOONACULAR_API_KEY,
            base_url=config.SPOONACULAR_BASE_URL,
            timeout=config.request_timeout,
        )
        self._query = ""
        self._recipes: list[Recipe] = []
        self._error = ""
        # Sequence number of the most recent submission, responses for older ones are dropped
        self._latest_seq = 0
        self._pending = 0

    @property
    def query(self) -> str:
        """Raw ingredient text as last set, untrimmed."""
        return self._query

    @property
    def recipes(self) -> list[Recipe]:
        """Copy of the current result list, in API order."""
        return list(self._recipes)

    @property
    def error(self) -> str:
        """User-facing error message, empty string when there is none."""
        return self._error

    @property
    def in_flight(self) -> bool:
        """True while an accepted request has not completed."""
        return self._pending > 0

    def set_query(self, text: str) -> None:
        """Replace the stored ingredient text. No validation happens here."""
        self._query = text

    async def submit(self) -> SearchOutcome:
        """Validate the query, run the search and map the outcome onto state.

        Returns:
            SearchOutcome naming the branch taken. STALE means a newer
            submission was made while this one was outstanding and its
            response was discarded.
        """
        self._latest_seq += 1
        seq = self._latest_seq

        if not self._query.strip():
            logger.debug("Rejected blank ingredient list", extra={"request_seq": seq})
            self._error = EMPTY_INPUT_MESSAGE
            return SearchOutcome.REJECTED

        self._error = ""
        self._recipes = []

        ingredients = self._query
        self._pending += 1
        try:
            recipes = await self.client.find_by_ingredients(ingredients)
        except RecipeFetchError as e:
            if seq != self._latest_seq:
                logger.debug(f"Discarding failure of superseded search: {e}", extra={"request_seq": seq})
                return SearchOutcome.STALE
            logger.error(f"Error fetching recipes: {e}", extra={"request_seq": seq})
            self._recipes = []
            self._error = FETCH_FAILED_MESSAGE
            return SearchOutcome.FAILED
        finally:
            self._pending -= 1

        if seq != self._latest_seq:
            logger.debug("Discarding response of superseded search", extra={"request_seq": seq})
            return SearchOutcome.STALE

        self._recipes = recipes
        self._error = ""
        logger.info(f"Found {len(recipes)} recipe(s) for {ingredients!r}", extra={"request_seq": seq})
        return SearchOutcome.POPULATED
