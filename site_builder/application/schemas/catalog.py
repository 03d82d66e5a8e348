"""Pydantic DTOs for the service catalog."""

from pydantic import BaseModel, Field

from site_builder.domain.entities import ServiceCategory


class CatalogEntryCreate(BaseModel):
    """Schema for creating a catalog entry — the id is assigned by the store."""

    model_config = {"extra": "forbid"}

    name: str = Field(..., min_length=1, max_length=255, examples=["Corte Degradê"])
    description: str = Field("", examples=["Corte moderno com técnica de degradê"])
    price: str = Field(..., examples=["R$ 35,00"])
    category: ServiceCategory


class CatalogEntryUpdate(BaseModel):
    """Schema for updating a catalog entry — all fields optional."""

    model_config = {"extra": "forbid"}

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: str | None = None
    category: ServiceCategory | None = None
