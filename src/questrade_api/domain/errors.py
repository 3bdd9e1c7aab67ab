class ApiError(Exception):
    """Non-success response from the Questrade token or data endpoints."""

    def __init__(self, message: str, code: int, body: str = ""):
        super().__init__(message)

        self.message = message
        self.code = code
        self.body = body

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, code={self.code})"
