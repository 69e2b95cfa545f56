import logging

from lexer import TokenType
from veerji_ast import Program, PrintStatement
from errors import VeerjiSyntaxError

logger = logging.getLogger(__name__)

PRINT_PRODUCTION = (TokenType.PRINT, TokenType.SEPARATOR, TokenType.STRING)

class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0
        self.current_token = self.tokens[0] if self.tokens else None

    def advance(self, count=1):
        self.pos += count
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]
        else:
            self.current_token = None

    def error(self):
        text = self.current_token.value if self.current_token else ''
        raise VeerjiSyntaxError(
            f"Syntax error at token {self.pos}: '{text}'",
            position=self.pos,
            token_text=text,
        )

    def matches(self, production):
        window = self.tokens[self.pos:self.pos + len(production)]
        if len(window) < len(production):
            return False
        return all(token.type == kind for token, kind in zip(window, production))

    def parse_statement(self):
        if self.matches(PRINT_PRODUCTION):
            literal = self.tokens[self.pos + 2].value
            self.advance(len(PRINT_PRODUCTION))
            return PrintStatement(literal)
        self.error()

    def parse_program(self):
        program = Program()

        while self.current_token is not None:
            program.append(self.parse_statement())

        logger.debug("parsed %d statement(s) from %d token(s)", program.count, len(self.tokens))
        return program

def parse(tokens):
    """Build a Program from a token list, raising VeerjiSyntaxError on mismatch."""
    return Parser(tokens).parse_program()
