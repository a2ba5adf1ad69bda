"""Pydantic response models for the hubgallery API.

FastAPI uses these for serialisation and OpenAPI documentation.  Character
model items are deliberately typed as plain JSON objects: the hub owns their
schema and the proxy passes them through untouched.

Models
------
AccountModelsPage
    Response of ``GET /api/vroid/models/account`` — one page of the signed-in
    account's character models plus the cursor of the next page.
ErrorResponse
    Body of every error response.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AccountModelsPage(BaseModel):
    """One normalised page of character models.

    Attributes:
        max_id: Cursor to send as ``max_id`` to fetch the next page, or
            ``None`` when this is the last page.  Serialised as ``maxId``.
        data: Character model objects in the hub's order.
    """

    model_config = ConfigDict(populate_by_name=True)

    max_id: str | None = Field(
        default=None,
        alias="maxId",
        description="Cursor of the next page, or null when there are no more pages.",
    )
    data: list[Any] = Field(
        default_factory=list,
        description="Character models exactly as returned by the hub.",
    )


class ErrorResponse(BaseModel):
    """Error body.

    Attributes:
        message: Human-readable error description.
    """

    message: str = Field(..., description="Human-readable error description.")
