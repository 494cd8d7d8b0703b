class ChatError(Exception):
    status = 500
    public_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class ValidationError(ChatError):
    """Malformed or missing fields in a request body."""

    status = 400
    public_message = "Invalid request"


class AuthorizationError(ChatError):
    """Username or sender outside the allow-list."""

    status = 403
    public_message = "Access denied"


class StorageError(ChatError):
    """Unexpected store failure. The message is never shown to clients."""

    status = 500
