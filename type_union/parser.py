# Parses the argument clause and the body of a type union declaration.
#
#   arguments   ::= ("super" "=" Identifier)?
#   declaration ::= attribute* visibility? "type" Identifier "=" Identifier ("+" Identifier)* ";"
#   attribute   ::= "@" Identifier ("." Identifier)* group?
#   visibility  ::= "pub" group?
#
# Attributes and visibility markers are captured as source text and never interpreted.

import keyword
import logging
import re

from .declarations import Arguments, UnionDeclaration

logger = logging.getLogger(__name__)

# Words with a meaning in the declaration grammar. They cannot name a union or a case.
RESERVED_WORDS = frozenset(["type", "super", "pub"])

_TOKEN_PATTERN = re.compile(
    r"""
      (?P<space>\s+)
    | (?P<ident>[^\W\d]\w*)
    | (?P<number>\d[\w.]*)
    | (?P<string>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")
    | (?P<punct>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_CLOSING = {"(": ")", "[": "]", "{": "}"}


def line_col(text, index):
    "Returns the 1-based (line, column) of the character at `index`."

    line = text.count("\n", 0, index) + 1
    line_start = text.rfind("\n", 0, index)
    return line, index - line_start


class DeclarationSyntaxError(RuntimeError):
    "Raised when a declaration or its argument clause does not match the grammar."

    def __init__(self, message, text, index):
        self.message = message
        self.index = index
        self.line, self.column = line_col(text, index)
        super().__init__(f"{self.line}:{self.column}: {message}")


class Token:
    def __init__(self, kind, value, start, end):
        self.kind = kind
        self.value = value
        self.start = start
        self.end = end

    @property
    def is_eof(self):
        return self.kind == "eof"

    def describe(self):
        if self.is_eof:
            return "end of input"
        return repr(self.value)

    def __repr__(self):
        return f"Token({self.kind!r}, {self.value!r}, {self.start}, {self.end})"


def tokenize(text):
    "Splits `text` into tokens. The returned list always ends with an `eof` token."

    tokens = []
    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        if kind == "space":
            continue
        tokens.append(Token(kind, match.group(), match.start(), match.end()))
    tokens.append(Token("eof", "", len(text), len(text)))
    return tokens


class _Parser:
    def __init__(self, text):
        self.text = text
        self.tokens = tokenize(text)
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos]

    def advance(self):
        token = self.tokens[self.pos]
        if not token.is_eof:
            self.pos += 1
        return token

    def at(self, kind, value=None):
        token = self.peek()
        return token.kind == kind and (value is None or token.value == value)

    def eat(self, kind, value=None):
        if self.at(kind, value):
            return self.advance()
        return None

    def expect(self, kind, value, what):
        token = self.eat(kind, value)
        if token is None:
            raise self.error(f"expected {what}, found {self.peek().describe()}")
        return token

    def error(self, message, token=None):
        token = self.peek() if token is None else token
        return DeclarationSyntaxError(message, self.text, token.start)

    def identifier(self, what, reserved=RESERVED_WORDS):
        token = self.peek()
        if token.kind != "ident" or not token.value.isidentifier():
            raise self.error(f"expected {what}, found {token.describe()}")
        if keyword.iskeyword(token.value) or token.value in reserved:
            raise self.error(f"expected {what}, found keyword {token.value!r}")
        return self.advance()

    def group(self):
        "Skips a balanced bracket group starting at the current token and returns its last token."

        opening = self.expect("punct", "(", "'('")
        stack = [_CLOSING[opening.value]]
        while True:
            token = self.advance()
            if token.is_eof:
                raise self.error(f"expected {stack[-1]!r}, found end of input", token)
            if token.kind != "punct":
                continue
            if token.value in _CLOSING:
                stack.append(_CLOSING[token.value])
            elif token.value in _CLOSING.values():
                if token.value != stack[-1]:
                    raise self.error(
                        f"expected {stack[-1]!r}, found {token.describe()}", token
                    )
                stack.pop()
                if not stack:
                    return token

    def attribute(self):
        start = self.expect("punct", "@", "'@'")
        last = self.identifier("attribute name", reserved=())
        while self.eat("punct", "."):
            last = self.identifier("attribute name", reserved=())
        if self.at("punct", "("):
            last = self.group()
        return self.text[start.start : last.end]

    def visibility(self):
        start = self.eat("ident", "pub")
        if start is None:
            return None
        last = start
        if self.at("punct", "("):
            last = self.group()
        return self.text[start.start : last.end]

    def finish(self, what):
        if not self.peek().is_eof:
            raise self.error(f"expected {what}, found {self.peek().describe()}")


def parse_arguments(text):
    """Parses the argument clause of a declaration.

    An empty clause is valid and yields no superset. A `super` keyword that is not
    followed by `=` and an identifier is a syntax error, as is any trailing token."""

    parser = _Parser(text)
    superset = None
    if parser.eat("ident", "super"):
        parser.expect("punct", "=", "'='")
        superset = parser.identifier("superset identifier").value
        parser.finish("end of arguments")
    else:
        parser.finish("'super' or end of arguments")
    return Arguments(superset=superset)


def parse_declaration(text):
    "Parses a declaration body into a UnionDeclaration."

    parser = _Parser(text)

    attributes = []
    while parser.at("punct", "@"):
        attributes.append(parser.attribute())

    visibility = parser.visibility()
    parser.expect("ident", "type", "'type'")
    name = parser.identifier("union name").value
    parser.expect("punct", "=", "'='")

    cases = []
    while True:
        cases.append(parser.identifier("case identifier").value)
        if parser.eat("punct", ";"):
            break
        parser.expect("punct", "+", "'+' or ';'")

    parser.finish("end of declaration")

    logger.debug("parsed declaration %r with %d case(s)", name, len(cases))
    return UnionDeclaration(
        name=name, cases=cases, attributes=attributes, visibility=visibility
    )
