class VeerjiSyntaxError(SyntaxError):
    def __init__(self, message, position=None, token_text=None):
        super().__init__(message)
        self.position = position
        self.token_text = token_text

class LineTooLongError(ValueError):
    def __init__(self, length, limit):
        super().__init__(f"Source line has {length} characters, limit is {limit}")
        self.length = length
        self.limit = limit
