"""
This file contains custom, application-specific exceptions.
"""

class BackendUnavailableError(Exception):
    """Raised when the remote backend cannot be reached at the transport level."""
    pass

class ApiRequestError(Exception):
    """Raised by the same-origin API client when a proxy route answers with a non-2xx status."""
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

class SlotWizardError(Exception):
    """Raised when a wizard operation is not permitted on the targeted slot."""
    pass

class IllegalTransitionError(SlotWizardError):
    """Raised when a wizard operation is invoked from a step that does not allow it."""
    pass
