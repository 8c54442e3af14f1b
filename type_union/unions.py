# Generates python source for a parsed type union declaration.
#
# A declaration `type Name = A + B;` produces:
#   - a class `Name` with one frozen dataclass variant per case (`Name.A`, `Name.B`),
#   - one injection function per case (`A_into_Name`, `B_into_Name`),
#   - with `super = Other`, a widening function `Name_into_Other`.
#
# The superset is referenced by name only and is never inspected.

import logging

from .codegen import ENV
from .declarations import Arguments
from .parser import parse_arguments, parse_declaration

logger = logging.getLogger(__name__)


class Variant:
    "A single case of a union. The case names the variant and the type it wraps."

    def __init__(self, union, case):
        self.name = case
        self.type_name = case
        self.class_name = f"_{union.name}_{case}"
        self.injection_name = f"{case}_into_{union.name}"


class TypeUnion:
    "A declaration prepared for rendering."

    def __init__(self, declaration, arguments=None):
        arguments = Arguments() if arguments is None else arguments

        self.name = declaration.name
        self.attributes = declaration.attributes
        self.visibility = declaration.visibility
        self.is_public = declaration.is_public
        self.superset = arguments.superset
        self.variants = [Variant(self, case) for case in declaration.cases]

    @property
    def widening_name(self):
        if self.superset is None:
            return None
        return f"{self.name}_into_{self.superset}"

    @property
    def cases_repr(self):
        names = [f'"{variant.name}"' for variant in self.variants]
        if len(names) == 1:
            return f"({names[0]},)"
        return "(" + ", ".join(names) + ")"

    @property
    def exported_names(self):
        names = [self.name]
        names.extend(variant.injection_name for variant in self.variants)
        if self.superset is not None:
            names.append(self.widening_name)
        return names


def _sections(T, imports):
    templ = ENV.get_template("unions.jinja2")

    if imports:
        yield templ.module.imports_def()
    yield templ.module.union_def(T)
    for variant in T.variants:
        yield templ.module.injection_def(T, variant)
    if T.superset is not None:
        yield templ.module.widening_def(T)
    if T.is_public:
        yield templ.module.exports_def(T)


def generate(declaration, arguments=None, imports=True):
    """Returns the python source for `declaration`.

    Generation does not validate anything: duplicate cases, unknown case types or a
    superset that lacks one of the cases are reported when the generated code runs
    (or by a type checker), not here.

    With `imports` unset the module imports the generated code relies on are left
    out; they must then come from an earlier expansion in the same module."""

    T = TypeUnion(declaration, arguments)
    source = "\n\n\n".join(str(section).strip("\n") for section in _sections(T, imports))
    logger.debug(
        "generated union %r (%d variant(s), superset=%r)",
        T.name,
        len(T.variants),
        T.superset,
    )
    return source + "\n"


def expand(attr, item, imports=True):
    """Parses the argument clause `attr` and the declaration `item` and returns the
    generated source. Raises DeclarationSyntaxError if either does not parse."""

    arguments = parse_arguments(attr)
    declaration = parse_declaration(item)
    return generate(declaration, arguments, imports=imports)
