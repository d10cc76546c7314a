"""
Pydantic models for the prompt catalog.

These models define the structure of the catalog document (JSON file or
MongoDB collection) and validate it once at load time.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CategoryDisplay(BaseModel):
    """Display metadata shared by every card of a category."""
    model_config = ConfigDict(frozen=True)

    color: str = Field("", description="CSS classes or colour for the category badge")
    gradient: str = Field("", description="Background gradient shown with the category's cards")


class Category(BaseModel):
    """A named group of conversation prompts."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique category identifier")
    name: str = Field(..., min_length=1, description="Label shown on the toggle button")
    display: CategoryDisplay = Field(default_factory=CategoryDisplay)
    prompts: tuple[str, ...] = Field(default=(), description="Prompts in display order")

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_display(cls, data: Any) -> Any:
        # Catalog files keep color/gradient next to the prompts
        if isinstance(data, dict) and "display" not in data:
            data = dict(data)
            data["display"] = {
                "color": data.pop("color", ""),
                "gradient": data.pop("gradient", ""),
            }
        return data

    @field_validator("prompts")
    @classmethod
    def _no_blank_prompts(cls, prompts: tuple[str, ...]) -> tuple[str, ...]:
        if any(not p.strip() for p in prompts):
            raise ValueError("prompts must not be blank")
        return prompts


class Catalog(BaseModel):
    """
    Ordered, read-only collection of categories.

    Category order is the order cards appear in a pool.
    """
    model_config = ConfigDict(frozen=True)

    categories: tuple[Category, ...]

    @field_validator("categories")
    @classmethod
    def _unique_ids(cls, categories: tuple[Category, ...]) -> tuple[Category, ...]:
        seen: set[str] = set()
        for category in categories:
            if category.id in seen:
                raise ValueError(f"duplicate category id: {category.id!r}")
            seen.add(category.id)
        return categories

    @property
    def category_ids(self) -> list[str]:
        return [c.id for c in self.categories]

    def get(self, category_id: str) -> Optional[Category]:
        return next((c for c in self.categories if c.id == category_id), None)

    def __contains__(self, category_id: object) -> bool:
        return any(c.id == category_id for c in self.categories)
