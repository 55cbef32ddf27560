"""Identity schemas."""

from pydantic import ConfigDict, EmailStr, Field

from flowable_client.schemas.base import FlowableModel


class UserInfo(FlowableModel):
    """Directory entry returned by the identity API. Immutable lookup value."""

    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    url: str | None = None

    @property
    def display_name(self) -> str:
        """First and last name joined, falling back to the id."""
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else self.id


class NewUserForm(FlowableModel):
    """Request body for creating a user in the engine's identity store."""

    id: str = Field(..., min_length=1, max_length=64)
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    password: str = Field(..., min_length=1, repr=False)
