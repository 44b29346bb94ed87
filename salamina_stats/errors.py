from typing import Optional


class APIError(Exception):
    """Upstream data failure, classified by source and code (TIMEOUT, HTTP_ERROR, ...)."""

    def __init__(self, source: str, code: str, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        base = f"{self.source} {self.code}: {self.message}"
        return f"{base} ({self.details})" if self.details else base

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "code": self.code,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
