"""AQL request payload sent to the server or embedded in transaction scripts."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AQLStatement(BaseModel):
    """An AQL query and its bind variables, shaped as the server expects them."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(description="The AQL query text")
    bind_vars: dict[str, Any] = Field(
        default_factory=dict,
        alias="bindVars",
        description="Values for the @name and @@collection placeholders in the query",
    )

    def to_json(self) -> str:
        """Serialise for embedding in server-side JavaScript.

        Bind variables are always an object, ``{}`` when there are none.
        """
        return self.model_dump_json(by_alias=True)
