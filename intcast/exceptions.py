class _BaseIntcastException(Exception):
    """
    Base intcast exception class.

    This exception is not raised directly. Other exceptions inherit it in
    order to share message and hint formatting.
    """

    def __init__(self, message="Error Message not found.", *items, hint=None):
        """
        Exception initializer.

        Arguments
        ---------
        message : str
            Error message to display with the exception.
        *items : object, optional
            Offending value(s) or kind(s). They are appended to the error
            string in the order given.
        hint : str | Callable, optional
            Suggestion shown after the message. May be a callable, in which
            case it is only evaluated when the message is formatted.
        """
        self._message = message
        self._hint = hint

        # strip out None items so that None can be passed when an item is
        # only optionally available
        self.annotations = [k for k in items if k is not None]

    @property
    def hint(self):
        if callable(self._hint):
            return self._hint()
        return self._hint

    @property
    def message(self):
        msg = self._message
        if self.hint:
            msg += f"\n\n  (hint: {self.hint})"
        return msg

    def __str__(self):
        if not self.annotations:
            return self.message

        annotation_msg = ", ".join(repr(a) for a in self.annotations)
        return f"{self.message}\n\n  {annotation_msg}"


class IntcastException(_BaseIntcastException):
    pass


class UnknownType(IntcastException):
    """Reference to an integer kind that does not exist."""


class InvalidLiteral(IntcastException):
    """Value is not an integer."""


class OverflowException(IntcastException):
    """Numeric value out of range for its own declared kind."""


class InvalidTarget(IntcastException):
    """Unsupported pointer width for the pointer-sized kinds."""


class IntcastInternalException(_BaseIntcastException):
    """
    Base intcast internal exception class.

    This exception is not raised directly, it is subclassed by other internal
    exceptions.

    Internal exceptions mean that a conversion decision was computed
    incorrectly, and that filing a bug report would be appropriate.
    """

    def __str__(self):
        return (
            f"{super().__str__()}\n\n"
            "This is an unhandled internal error in intcast. "
            "Please create an issue to notify the developers!"
        )


class ConversionPanic(IntcastInternalException):
    """A destination bound could not be re-expressed in the source kind."""


class RangeOrderingError(IntcastInternalException):
    """Floating point range ordering disagrees with the exact ordering."""
