"""Syntactic validation of raw command arguments.

Every validator receives the positional arguments of one command exactly as
they came from the command line and either returns them (normalized where
noted) or raises ``AppError`` with a user-facing message. Nothing here reads
the todo store: whether an id actually exists is decided by the operations
layer.
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence, Union

from todo_cli.errors import AppError


VALID_STATUSES = ("done", "not-done")
MIN_SEARCH_TITLE_LENGTH = 3

Number = Union[int, float]


def _first(params: Sequence[Any]) -> Any:
    return params[0] if len(params) > 0 else None


def is_numeric(value: Any) -> bool:
    """Check whether a raw argument can be read as a number.

    Accepts ints, floats and strings holding a decimal number, surrounding
    whitespace allowed. Booleans, blank strings, NaN and infinities are
    rejected.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return False
        try:
            number = float(text)
        except ValueError:
            return False
        return math.isfinite(number)
    return False


def to_number(value: Any) -> Number:
    """Coerce a raw argument to a number.

    Integral values come back as ``int`` so they compare and print like ids.

    Raises:
        AppError: If the value is not numeric
    """
    if not is_numeric(value):
        raise AppError("Id is not a number, please provide a number")
    number = float(value.strip()) if isinstance(value, str) else value
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def to_id(value: Any) -> int:
    """Coerce a numeric raw argument to an integer id, dropping any fraction."""
    return int(to_number(value))


def validate_add_params(params: Sequence[Any]) -> Sequence[Any]:
    if len(params) != 1:
        raise AppError("Give a title as the only parameter in parenthesis.")
    title = params[0]
    if not isinstance(title, str) or len(title) == 0:
        raise AppError("The title must be a non zero length string.")
    return params


def validate_find_by_id_param(params: Sequence[Any]) -> Sequence[Any]:
    if not is_numeric(_first(params)):
        raise AppError("Id is not a number, please provide a number")
    return params


def validate_find_by_title_param(params: Sequence[Any]) -> Sequence[Any]:
    title = _first(params)
    if not isinstance(title, str) or len(title) < MIN_SEARCH_TITLE_LENGTH:
        raise AppError("The title should be string and at least 3 character long!")
    return params


def validate_status_param(params: Sequence[Any]) -> str:
    """Validate a status filter.

    Unlike the other validators this returns the scalar status string rather
    than the argument sequence.
    """
    status = _first(params)
    if not isinstance(status, str) or status not in VALID_STATUSES:
        raise AppError("Status have to be 'done' or 'not-done' string!")
    return status


def validate_complete_todo_param(params: Any) -> Sequence[Any]:
    if not isinstance(params, (list, tuple)):
        raise AppError("Parameters must be passed as an array.")
    if len(params) != 1:
        raise AppError("Give a numeric id as the only parameter in parenthesis.")
    validate_find_by_id_param([params[0]])
    return params


def validate_edit_title_params(params: Sequence[Any]) -> Sequence[Any]:
    if len(params) != 2:
        raise AppError("Give a numeric id and a title in parenthesis as the params.")
    todo_id, new_title = params
    validate_find_by_id_param([todo_id])
    validate_add_params([new_title])
    return params


def validate_delete_todo_params(params: Sequence[Any]) -> Sequence[Any]:
    if len(params) != 1:
        raise AppError("Give a numeric id as the only parameter in parenthesis.")
    validate_find_by_id_param([params[0]])
    return params


def validate_add_label_params(params: Sequence[Any]) -> List[Any]:
    """Validate ``[id, label]`` for the add-label command.

    This is the one validator that normalizes its input: the id comes back
    as an ``int``.

    Returns:
        ``[todo_id, label]`` with the id parsed to an integer
    """
    if len(params) != 2:
        raise AppError("Give two parameters: todo ID and label.")
    todo_id, label = params
    if not is_numeric(todo_id):
        raise AppError("The ID must be a numeric value.")
    if not isinstance(label, str) or len(label) == 0:
        raise AppError("Label must be a non-empty string.")
    return [to_id(todo_id), label]
