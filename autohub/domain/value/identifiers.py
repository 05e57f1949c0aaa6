"""Strongly typed identifiers for AutoHub domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
ActivityId = NewType("ActivityId", UUID)
BusinessId = NewType("BusinessId", UUID)
ReviewId = NewType("ReviewId", UUID)
ClaimId = NewType("ClaimId", UUID)
VehicleId = NewType("VehicleId", UUID)
BlogPostId = NewType("BlogPostId", UUID)
CommentId = NewType("CommentId", UUID)
ReplyId = NewType("ReplyId", UUID)
CategoryId = NewType("CategoryId", UUID)
