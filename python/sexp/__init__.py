"""Read and write S-expressions as nested Python lists."""

import logging

from sexp.codec import Codec
from sexp.errors import MalformedExpression, SerializationError, SExpError
from sexp.options import DEFAULT_OPTIONS, Options
from sexp.parser import Value, parse
from sexp.serializer import serialize, serialize_string
from sexp.tokenizer import Token, TokenKind, tokenize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_OPTIONS",
    "Codec",
    "MalformedExpression",
    "Options",
    "SExpError",
    "SerializationError",
    "Token",
    "TokenKind",
    "Value",
    "parse",
    "serialize",
    "serialize_string",
    "tokenize",
]
