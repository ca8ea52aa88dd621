"""Outgoing message model"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..enums import MessageType

if TYPE_CHECKING:
    from ..user import User


# messageKind the group messaging API uses for plain text
TEXT_MESSAGE_KIND = 1


@dataclass
class Message:
    """
    Content to send to a User.

    ``receiver`` is filled in by ``User.send_message`` right before the
    request is built; callers leave it unset.

    Attributes:
        message_type: Kind of content (only TEXT is sendable)
        text: Message body for TEXT messages
        users_to_invite: Extra online ids added to the message group
        receiver: The User the message is sent to
    """
    message_type: MessageType = MessageType.TEXT
    text: str = ""
    users_to_invite: List[str] = field(default_factory=list)
    receiver: Optional[User] = None

    def recipients(self) -> List[str]:
        """Receiver first, then invited users, without duplicates."""
        ids = []
        if self.receiver is not None:
            ids.append(self.receiver.online_id)
        for online_id in self.users_to_invite:
            if online_id not in ids:
                ids.append(online_id)
        return ids

    def to_request(self) -> Dict[str, Any]:
        """Convert a text message to the messageGroups request body."""
        return {
            "to": self.recipients(),
            "message": {
                "body": self.text,
                "messageKind": TEXT_MESSAGE_KIND,
            },
        }
