"""
Closed set of failures a TODO API call can report.
What it defines:
- NetworkError: exchange not completed, or 2xx body not decodable
- ItemNotFound: HTTP 404
- UnknownError: any other non-2xx status, keeping the code

And, the main purpose:
Give callers one tagged value to match on instead of raw exceptions.
"""


from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

class NetworkError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["network_error"] = "network_error"

class ItemNotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["item_not_found"] = "item_not_found"

class UnknownError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown_error"] = "unknown_error"
    code: int = Field(..., description="HTTP status returned by the server")

ClientError = Annotated[
    Union[NetworkError, ItemNotFound, UnknownError],
    Field(discriminator="kind"),
]
