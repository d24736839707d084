from rscheme.reader.lexer import lex, tokenize
from rscheme.reader.parser import Incomplete, Parser, parse

__all__ = ["lex", "tokenize", "Incomplete", "Parser", "parse"]
