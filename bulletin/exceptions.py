class InvalidArgument(ValueError):
    """ Raised when a subject is handed something it cannot register """


class PreconditionViolation(RuntimeError):
    """ Raised when an observer pulls state before it is bound to a subject """
