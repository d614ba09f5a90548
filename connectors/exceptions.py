# connectors/exceptions.py

class SummarizerError(Exception):
    pass


class SummarizerUnavailable(SummarizerError):
    pass


class SummarizerTimeout(SummarizerError):
    pass


class MalformedResponse(SummarizerError):
    pass
