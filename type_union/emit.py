# Entry points for cog blocks. Only import this module from inside a cog block:
#
#   # [[[cog
#   # from type_union.emit import type_union
#   # type_union("super = SomeString", "type UniqueString = String + BoxedStr;")
#   # ]]]
#   # [[[end]]]

import cog

from .parser import DeclarationSyntaxError
from .unions import expand


def _expand(attr, item, imports):
    try:
        return expand(attr, item, imports=imports)
    except DeclarationSyntaxError as err:
        cog.error(f"{cog.inFile}:{cog.firstLineNum}: type_union: {err}")


def _joined(pairs, each):
    for (index, pair) in enumerate(pairs):
        if index != 0:
            cog.outl()
            cog.outl()
        each(*pair, imports=index == 0)


def type_union(attr, item, imports=True):
    "Expands a single declaration in place of the surrounding cog block."

    cog.out(_expand(attr, item, imports))


def type_unions(*pairs):
    "Expands several (attr, item) declarations, separated by blank lines. Imports are emitted once."

    _joined(pairs, type_union)
