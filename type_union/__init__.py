# Generates tagged unions, injection functions and widening functions from
# declarations such as `type Value = Int + Str;`.

from .declarations import Arguments, UnionDeclaration
from .parser import DeclarationSyntaxError, parse_arguments, parse_declaration
from .unions import expand, generate

__all__ = [
    "Arguments",
    "DeclarationSyntaxError",
    "UnionDeclaration",
    "expand",
    "generate",
    "parse_arguments",
    "parse_declaration",
]
