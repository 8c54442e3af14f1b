# Contains the parsed form of a type union declaration and its arguments.


class Arguments:
    "The argument clause of a declaration, i.e. `super = Name`."

    def __init__(self, superset=None):
        self.superset = superset

    def __eq__(self, other):
        if not isinstance(other, Arguments):
            return NotImplemented
        return self.superset == other.superset

    def __repr__(self):
        return f"Arguments(superset={self.superset!r})"


class UnionDeclaration:
    """Represents a declaration of the form `[attributes] [pub] type Name = A + B + C;`.

    Attributes and the visibility marker are kept as their exact source text.
    Every case names both the wrapped type and the variant that wraps it.
    Duplicate cases are not rejected here."""

    def __init__(self, name, cases, attributes=None, visibility=None):
        self.name = name
        self.cases = list(cases)
        self.attributes = [] if attributes is None else list(attributes)
        self.visibility = visibility

    @property
    def is_public(self):
        return self.visibility is not None

    def __eq__(self, other):
        if not isinstance(other, UnionDeclaration):
            return NotImplemented
        return (
            self.name == other.name
            and self.cases == other.cases
            and self.attributes == other.attributes
            and self.visibility == other.visibility
        )

    def __repr__(self):
        return (
            f"UnionDeclaration(name={self.name!r}, cases={self.cases!r}, "
            f"attributes={self.attributes!r}, visibility={self.visibility!r})"
        )
