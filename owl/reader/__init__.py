from owl.reader.parser import lex, parse, TokenStream

__all__ = ["lex", "parse", "TokenStream"]
