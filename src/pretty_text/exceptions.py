class PrettyTextError(Exception):
    """Base class for errors raised by pretty_text."""


class InvalidCategoryKeyError(PrettyTextError, ValueError):
    """A display name was requested for a missing category key."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"{category} cannot be None")
