from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class CommentCreate(BaseModel):
    """Public comment or reply payload. Unknown fields such as isApproved are dropped."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    comment: str = Field(..., min_length=1, max_length=5000)

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value
