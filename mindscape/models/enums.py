"""
Enum definitions for the MindScape API.
"""
from enum import Enum


class ViewName(str, Enum):
    """The one view rendered at a time."""
    LIST = "list"
    READ = "read"
    EDIT = "edit"
    BRAINSTORM = "brainstorm"


class NavigationTarget(str, Enum):
    """Views reachable unconditionally from the navigation menu."""
    LIST = "list"
    EDIT = "edit"
    BRAINSTORM = "brainstorm"


class MessageRole(str, Enum):
    """Author of a brainstorm transcript entry."""
    USER = "user"
    ASSISTANT = "assistant"


class DegradedReason(str, Enum):
    """Why an AI call did not produce usable text."""
    MISSING_CREDENTIAL = "missing_credential"
    REMOTE_ERROR = "remote_error"
    EMPTY_RESPONSE = "empty_response"
