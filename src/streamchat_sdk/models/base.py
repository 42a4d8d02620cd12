from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict

T = TypeVar("T")


class ChatModel(BaseModel):
    """Base for all request and response models.

    Unknown fields are kept so custom data attached to users, channels and
    messages by the backend survives decoding.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


def none_as_empty(value: Any) -> Any:
    """Decode a ``null`` list from the backend as an empty list."""
    return [] if value is None else value


# A list the backend may send as ``null``.
NullableList = Annotated[list[T], BeforeValidator(none_as_empty)]
