from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    CREDENTIAL_MISSING = "credential_missing"
    QUOTA_EXCEEDED = "quota_exceeded"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"


class FinagentError(Exception):
    """
    Base error. `kind` is set where the error is raised and is what the
    endpoint matches on when choosing the client-facing message.
    """

    kind: ErrorKind = ErrorKind.TRANSPORT


class InvalidRequestError(FinagentError):
    kind = ErrorKind.VALIDATION


class CredentialMissingError(FinagentError):
    kind = ErrorKind.CREDENTIAL_MISSING

    def __init__(self, credential: str) -> None:
        super().__init__(f"{credential} is not set")
        self.credential = credential


class QuotaExceededError(FinagentError):
    kind = ErrorKind.QUOTA_EXCEEDED


class SymbolNotFoundError(FinagentError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, symbol: str, what: str = "data") -> None:
        super().__init__(f"No {what} found for symbol: {symbol}")
        self.symbol = symbol


class UpstreamError(FinagentError):
    kind = ErrorKind.TRANSPORT


class AgentTimeoutError(UpstreamError):
    pass
