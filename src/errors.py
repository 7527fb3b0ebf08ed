#!/usr/bin/env python3
"""
Exceptions raised by the DAppNode build action
"""

from typing import Optional


class BuildActionError(Exception):
    """Base class for errors raised by the action itself"""


class ContextError(BuildActionError):
    """Raised when the action is not running inside a GitHub Actions context"""

    def __init__(self, message: str = "Not in Github action context"):
        super().__init__(message)


class UnsupportedEventError(BuildActionError):
    """Raised for events other than 'push' and 'pull_request'"""

    def __init__(self, event_name: str):
        self.event_name = event_name
        super().__init__(f"Unsupported event {event_name}")


class BuildError(BuildActionError):
    """Raised when the SDK build command fails"""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
