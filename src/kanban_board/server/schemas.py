"""Pydantic request models for the board API."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from kanban_board.services.payload_validator import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH


class TitledPayload(BaseModel):
    """Body shared by project create/update and task update."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    description: str = Field(min_length=1)


class AttachmentPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str = Field(min_length=1)
    url: str = Field(min_length=1)


class CreateTaskRequest(TitledPayload):
    attachments: Optional[List[AttachmentPayload]] = None


class TaskReference(BaseModel):
    """A card as sent back by the board client; only its id is used."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id", min_length=1)


class StageGroup(BaseModel):
    items: List[TaskReference]


BoardState = Dict[str, StageGroup]
