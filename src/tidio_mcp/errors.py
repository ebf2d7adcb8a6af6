"""
Error types raised while serving Tidio tool calls
"""

from typing import Any


class TidioError(Exception):
    """Base class for every failure a tool call can report"""


class ValidationError(TidioError):
    """Tool name unknown or a required argument missing"""


class UpstreamError(TidioError):
    """Tidio answered with a non-2xx status"""

    def __init__(self, status_code: int, status_text: str, body: Any, serialized_body: str):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"API Error {status_code}: {status_text} - {serialized_body}")


class TransportError(TidioError):
    """The request never got a response"""

    def __init__(self, message: str):
        super().__init__(f"Tidio API request failed: {message}")
