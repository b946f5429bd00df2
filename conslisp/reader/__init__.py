from conslisp.reader.lexer import Token, lex
from conslisp.reader.parser import parse, parse_one

__all__ = ["Token", "lex", "parse", "parse_one"]
