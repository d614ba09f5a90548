# engine/exceptions.py

class CorrelationError(Exception):
    pass


class InvalidRecord(CorrelationError):
    pass
