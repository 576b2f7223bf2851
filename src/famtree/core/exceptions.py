from __future__ import annotations


class FamilyTreeError(Exception):
    """Base exception for recoverable tree editing failures.

    ``str(exc)`` is the message shown to the user at the menu.
    """

    default_message = "Operation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidInput(FamilyTreeError):
    """Raised when a required name is empty."""

    default_message = "Empty name. Aborted."


class DuplicateName(FamilyTreeError):
    """Raised when a member with the same name is already registered."""

    default_message = "Member already exists. Aborted."


class AlreadyExists(FamilyTreeError):
    """Raised when a root is created twice."""

    default_message = "Root already exists."


class NotFound(FamilyTreeError):
    """Raised when a name lookup misses."""

    default_message = "Member not found."


class AlreadyDeceased(FamilyTreeError):
    """Raised when a member is marked deceased a second time."""

    default_message = "Already marked Late."


class RootMissing(FamilyTreeError):
    """Raised when an operation needs a root and none exists yet."""

    default_message = "Create root first (option 1)."
