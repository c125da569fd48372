class FelispError(Exception):
    """ Base class for all Felisp errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Reason(FelispError):
    """ The single error kind raised by the reader and the evaluator.

    Errors are distinguished only by their message text.
    """
    pass
