"""Errors raised by adapters to systems outside the process."""


class AdapterError(Exception):
    """Base adapter error."""


class PaymentProcessorError(AdapterError):
    """The payment processor rejected a request or could not be reached.

    The message is the processor's own explanation when it gave one.
    """
