class UsersError(Exception):
    """Base exception for users app errors"""

    default_message = ""

    def __init__(self, message: str | None = None):
        if message is None:
            message = self.default_message
        super().__init__(message)


class ProfileUpdateError(UsersError):
    default_message = "The profile could not be saved."


class EmptyProfileUpdateError(ProfileUpdateError):
    default_message = "At least one profile field must be provided."
