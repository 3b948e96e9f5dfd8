"""Data models for the campus knowledge base.

These models define the structure of the canned-response table and the
quick actions, independent of the file format they are loaded from.
"""

from collections.abc import Iterator

from pydantic import BaseModel, Field, field_validator, model_validator

# Category attached to the fallback response
GENERAL_CATEGORY = "general"


class QuickAction(BaseModel):
    """A preset button that submits a fixed query string."""

    label: str = Field(min_length=1, description="Button caption")
    icon: str = Field(default="", description="Glyph shown before the label")
    query: str = Field(min_length=1, description="Query submitted when pressed")
    category: str = Field(description="Category the query is expected to hit")

    model_config = {"frozen": True}

    @field_validator("query")
    @classmethod
    def _query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("quick action query must not be blank")
        return value

    @field_validator("category")
    @classmethod
    def _normalize_category(cls, value: str) -> str:
        return value.strip().lower()


class MatchResult(BaseModel):
    """Outcome of matching a query against the knowledge base."""

    content: str = Field(description="Canned response text")
    category: str = Field(description="Matched category or 'general'")
    phrase: str | None = Field(default=None, description="Phrase key that matched, if any")

    model_config = {"frozen": True}

    @property
    def is_fallback(self) -> bool:
        """True when no entry matched and the fallback was returned."""
        return self.phrase is None


class CampusData(BaseModel):
    """Complete static knowledge base.

    ``categories`` maps category name -> phrase key -> response text. Both
    levels keep their declaration order, which is the matching order.
    """

    greeting: str = Field(min_length=1, description="First assistant message of a session")
    fallback: str = Field(min_length=1, description="Response for unmatched queries")
    categories: dict[str, dict[str, str]] = Field(description="Category -> phrase -> response")
    quick_actions: list[QuickAction] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("categories")
    @classmethod
    def _normalize_categories(
        cls, value: dict[str, dict[str, str]]
    ) -> dict[str, dict[str, str]]:
        if not value:
            raise ValueError("at least one category is required")

        normalized: dict[str, dict[str, str]] = {}
        for category, phrases in value.items():
            name = category.strip().lower()
            if not name:
                raise ValueError("category names must not be blank")
            if name == GENERAL_CATEGORY:
                raise ValueError(f"'{GENERAL_CATEGORY}' is reserved for the fallback response")
            if name in normalized:
                raise ValueError(f"duplicate category: {name}")
            if not phrases:
                raise ValueError(f"category '{name}' has no phrases")

            entries: dict[str, str] = {}
            for phrase, response in phrases.items():
                key = " ".join(phrase.lower().split())
                if not key:
                    raise ValueError(f"blank phrase key in category '{name}'")
                if key in entries:
                    raise ValueError(f"duplicate phrase '{key}' in category '{name}'")
                if not response or not response.strip():
                    raise ValueError(f"empty response for '{key}' in category '{name}'")
                entries[key] = response
            normalized[name] = entries
        return normalized

    @model_validator(mode="after")
    def _quick_actions_reference_categories(self) -> "CampusData":
        for action in self.quick_actions:
            if action.category not in self.categories:
                raise ValueError(
                    f"quick action '{action.label}' references unknown category "
                    f"'{action.category}'"
                )
        return self

    @property
    def category_names(self) -> list[str]:
        """Category names in declaration order."""
        return list(self.categories)

    def iter_entries(self) -> Iterator[tuple[str, str, str]]:
        """Yield (category, phrase, response) triples in declaration order."""
        for category, phrases in self.categories.items():
            for phrase, response in phrases.items():
                yield category, phrase, response

    def get_quick_action(self, label: str) -> QuickAction | None:
        """Find a quick action by its label (case-insensitive)."""
        wanted = label.strip().lower()
        for action in self.quick_actions:
            if action.label.lower() == wanted:
                return action
        return None
