"""Todo record and typed command parameters.

This module provides the ``Todo`` model stored in the collection, plus one
small parameter model per command. Raw argument sequences are checked by
``todo_cli.validate`` first; the parameter models only carry the already
validated values into the operations layer.
"""

from typing import List, Literal, Union

import pydantic as pd


class Todo(pd.BaseModel):
    """A single todo item.

    Attributes:
        id: Positive integer identity, assigned by ``add`` and never reused
        title: Non-empty title text
        done: Completion flag, only ever flipped to True by ``complete``
        labels: Free-text tags in insertion order, without duplicates
    """

    id: int = pd.Field(ge=1)
    title: str = pd.Field(min_length=1)
    done: bool = False
    labels: List[str] = pd.Field(default_factory=list)

    model_config = pd.ConfigDict(extra="ignore")

    def has_label(self, label: str) -> bool:
        return label in self.labels

    def __repr__(self) -> str:
        return (
            f"Todo(id={self.id!r}, title={self.title!r}, "
            f"done={self.done!r}, labels={self.labels!r})"
        )


class NoParams(pd.BaseModel):
    """Parameters for commands that take no arguments."""

    model_config = pd.ConfigDict(frozen=True)


class TitleParams(pd.BaseModel):
    title: str

    model_config = pd.ConfigDict(frozen=True)


RawId = Union[int, float, str]


class IdParams(pd.BaseModel):
    """Id as given on the command line; lookups coerce it and errors echo it."""

    id: RawId

    model_config = pd.ConfigDict(frozen=True)


class StatusParams(pd.BaseModel):
    status: Literal["done", "not-done"]

    model_config = pd.ConfigDict(frozen=True)


class EditTitleParams(pd.BaseModel):
    id: RawId
    title: str

    model_config = pd.ConfigDict(frozen=True)


class LabelParams(pd.BaseModel):
    id: int
    label: str

    model_config = pd.ConfigDict(frozen=True)
