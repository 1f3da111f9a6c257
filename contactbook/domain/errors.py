"""Domain exceptions."""


class NotFoundError(Exception):
    """Requested identity does not exist."""

    resource = "Resource"

    def __init__(self, identity: int) -> None:
        self.identity = identity
        super().__init__(f"{self.resource} with id={identity} not found")

    @property
    def detail(self) -> str:
        return f"{self.resource} not found"


class ContactNotFoundError(NotFoundError):
    resource = "Contact"


class PhoneNotFoundError(NotFoundError):
    """Phone id in an update payload is not one of the contact's phones."""

    resource = "Phone"
