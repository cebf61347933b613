class HoagieError(Exception):
    """ Base class for all host-side HoagieLisp errors"""
    pass


class HoagieSyntaxError(HoagieError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message)
        self.position = position
