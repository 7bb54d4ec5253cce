"""
User record model for the JSON user document.
"""
from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    One entry of the persisted user list.

    The hash is stored under the ``password`` key so existing documents keep
    loading; it never holds plaintext.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: str = Field(..., description="Unique, case-sensitive username")
    password_hash: str = Field(
        ...,
        alias="password",
        description="Bcrypt hashed password",
    )


# Ordered, insertion order preserved
UserCollection = list[UserRecord]
