"""Outcome of one TODO API call: exactly one of Success or Failure."""

from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeAliasType

from todo_api_client.api.errors import ClientError

T = TypeVar("T")


class Success(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T

    def is_success(self) -> bool:
        return True

    def value_or_none(self) -> Optional[T]:
        return self.value

    def error_or_none(self) -> None:
        return None


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: ClientError

    def is_success(self) -> bool:
        return False

    def value_or_none(self) -> None:
        return None

    def error_or_none(self) -> ClientError:
        return self.error


# Success[T] is Success itself on a pydantic generic, so a plain Union alias has
# no free parameter; declare T explicitly.
Result = TypeAliasType("Result", Union[Success[T], Failure], type_params=(T,))
