from typing import Literal, Optional
from pydantic import BaseModel, EmailStr

TargetType = Literal["blog", "product"]


class Comment(BaseModel):
    """
    A blog or product comment. Top-level comments have no parentCommentId;
    replies point at a top-level comment on the same target.
    """
    commentId: str
    targetType: TargetType
    targetId: str
    name: str
    email: EmailStr
    comment: str
    parentCommentId: Optional[str] = None
    isApproved: bool = False
    createdAt: str
    updatedAt: str

    @property
    def is_reply(self) -> bool:
        return self.parentCommentId is not None
