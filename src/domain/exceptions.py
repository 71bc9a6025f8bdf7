from typing import Optional

class StoreException(Exception):
    """Base exception for all plugin store errors."""
    pass

class RegistryError(StoreException):
    """Raised when a page of plugins cannot be obtained from the registry."""
    def __init__(self, message: str = "Failed to fetch plugin list.", status_code: Optional[int] = None):
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} HTTP status: {status_code}"
        super().__init__(message)

class ClipboardError(StoreException):
    """Raised when the system clipboard cannot be written."""
    pass
