"""The list of every table model in the package."""

from __future__ import annotations

# The model modules register their classes when they are imported.
from komodels import editor, npc, ranking, rental, server, user, webmall  # noqa: F401
from komodels.database import Model, registered_models


def model_list() -> list[Model]:
    """Return one fresh instance of every model, ordered by class name."""
    classes = sorted(registered_models(), key=lambda cls: cls.__name__)
    return [cls() for cls in classes]


def find_model(table_name: str) -> Model:
    """Return a fresh instance of the model for a table name.

    Raises KeyError if no model has that table name.
    """
    for model in model_list():
        if model.table_name() == table_name:
            return model
    raise KeyError(table_name)