"""Domain errors for friendships."""

from tikd.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError


class FriendRequestNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__()


class NotRecipientError(ForbiddenError):
    """Raised when someone other than the recipient settles a request."""

    def __init__(self) -> None:
        super().__init__()


class NoRecipientsError(ValidationError):
    def __init__(self) -> None:
        super().__init__("No valid recipients provided.")


class SelfRequestError(ValidationError):
    def __init__(self) -> None:
        super().__init__("You cannot send a request to yourself.")


class UserEmailNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("No user found with that email.")


class InvalidRequestIdError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid request id")


class FriendshipExistsError(ConflictError):
    """Raised by stores when the unordered user pair already has an edge."""

    def __init__(self) -> None:
        super().__init__("Friendship already exists.")
