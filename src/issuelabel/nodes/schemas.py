"""Pydantic schemas for issues flowing through the pipeline."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Issue(BaseModel):
    """An issue fetched from the tracker. Read-only inside the pipeline."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    body: Optional[str] = None
    has_pull_request: bool = False
