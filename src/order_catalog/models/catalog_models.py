"""Catalog reference data models.

Food items and users are created once when the catalog is seeded and are
read-only afterwards, so both models are frozen.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class FoodItem(BaseModel):
    """A dish or drink that can appear on menus and in orders."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier for the food item")
    name: str = Field(..., description="Item name")
    description: str = Field(..., description="Item description")
    price: Decimal = Field(..., description="Item price", ge=0)


class User(BaseModel):
    """A customer or delivery driver."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier within the user's role")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email address")
    phone: str = Field(..., description="Contact phone number")
