import logging
from dataclasses import dataclass
from enum import Enum, auto

import config
from errors import LineTooLongError

logger = logging.getLogger(__name__)

class TokenType(Enum):
    PRINT = auto()
    SEPARATOR = auto()
    STRING = auto()
    UNKNOWN = auto()

@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

class Lexer:
    def __init__(self, source, max_length=None):
        self.source = source
        self.max_length = config.MAX_LINE_LENGTH if max_length is None else max_length
        self.pos = 0
        self.current_char = self.source[0] if source else None

    def advance(self, count=1):
        self.pos += count
        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def skip_spaces(self):
        # only ASCII spaces, tabs belong to the literal
        while self.current_char == ' ':
            self.advance()

    def string_literal(self):
        end = self.source.find('\n', self.pos)
        if end == -1:
            end = len(self.source)
        text = self.source[self.pos:end]
        if text.endswith('\r'):
            text = text[:-1]
        self.advance(end - self.pos)
        return text

    def tokenize(self):
        if self.max_length and len(self.source) > self.max_length:
            raise LineTooLongError(len(self.source), self.max_length)

        tokens = []

        if not self.source.startswith(config.KEYWORD_PRINT):
            tokens.append(Token(TokenType.UNKNOWN, config.UNKNOWN_PLACEHOLDER))
            logger.debug("line does not start with %r", config.KEYWORD_PRINT)
            return tokens

        tokens.append(Token(TokenType.PRINT, config.KEYWORD_PRINT))
        self.advance(len(config.KEYWORD_PRINT))

        sep = self.source.find(config.SEPARATOR, self.pos)
        if sep == -1:
            logger.debug("separator %r not found after keyword", config.SEPARATOR)
            return tokens

        tokens.append(Token(TokenType.SEPARATOR, config.SEPARATOR))
        self.advance(sep + len(config.SEPARATOR) - self.pos)

        self.skip_spaces()
        tokens.append(Token(TokenType.STRING, self.string_literal()))

        logger.debug("tokenized %d tokens", len(tokens))
        return tokens

def tokenize(line, max_length=None):
    """Convert one source line into its token list (0 to 3 tokens)."""
    return Lexer(line, max_length=max_length).tokenize()
