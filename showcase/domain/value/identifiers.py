"""Strongly typed identifiers for showcase domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Users are keyed by the identity provider's stable user id
UserId = NewType("UserId", str)

# Serial primary keys
ProjectId = NewType("ProjectId", int)
CategoryId = NewType("CategoryId", int)

# Assigned by the application on creation
VoteId = NewType("VoteId", UUID)
DailyWinnerId = NewType("DailyWinnerId", UUID)
