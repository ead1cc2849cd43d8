"""Exception types for Silicon Soul."""


class SiliconSoulError(Exception):
    """Base class for errors raised by siliconsoul.core."""


class BootSequenceError(SiliconSoulError, RuntimeError):
    """Raised when a boot sequence is driven outside its lifecycle."""


class ControllerStateError(SiliconSoulError, RuntimeError):
    """Raised when a transition controller is started or attached out of order."""
