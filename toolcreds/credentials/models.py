"""Credential domain models."""

from pydantic import BaseModel, ConfigDict, Field


class Credential(BaseModel):
    """A stored credential, uniquely identified by (context, name).

    The context scopes the credential to one tool user (or a namespace).
    Only the key is modeled; secret values never pass through this core.
    """

    model_config = ConfigDict(frozen=True)

    context: str = Field(..., min_length=1, description="Credential context")
    name: str = Field(..., min_length=1, description="Credential (tool) name")

    @property
    def key(self) -> tuple[str, str]:
        return self.context, self.name
