"""Custom exceptions for outbox message execution."""


class OutboxExecuteError(Exception):
    """Base exception for outbox execution operations."""


class ConfigurationError(OutboxExecuteError):
    """Raised when required environment configuration is missing or invalid."""


class InvalidChainIdError(OutboxExecuteError):
    """Raised when no built-in network addresses exist for a chain ID."""


class InvalidTransactionHashError(OutboxExecuteError):
    """Raised when a transaction hash is malformed."""


class TransactionNotFoundError(OutboxExecuteError):
    """Raised when the L2 node has no receipt for the given transaction."""


class NoOutgoingMessagesError(OutboxExecuteError):
    """Raised when a transaction did not emit the requested outgoing message."""


class MessageNotFoundError(OutboxExecuteError):
    """Raised when the outgoing message state is NOT_FOUND."""


class MessageAlreadyExecutedError(OutboxExecuteError):
    """Raised when the outgoing message was already executed on L1."""


class ProofNotAvailableError(OutboxExecuteError):
    """Raised when the L2 node cannot produce a proof for an outgoing message."""


class ExecutionFailedError(OutboxExecuteError):
    """Raised when the outbox execution transaction reverts."""
