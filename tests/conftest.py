import itertools
import sys
import types

import pytest

_counter = itertools.count()


class String(str):
    pass


class BoxedStr:
    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, BoxedStr) and other.text == self.text

    def __hash__(self):
        return hash(self.text)


class ArcStr(BoxedStr):
    pass


class Int(int):
    pass


class Float(float):
    pass


@pytest.fixture
def load_generated(monkeypatch):
    """Executes generated source in a fresh module and returns the module.

    The module is registered in sys.modules because dataclasses resolve string
    annotations through the defining module."""

    def load(*sources):
        name = f"generated_union_{next(_counter)}"
        module = types.ModuleType(name)
        module.__dict__.update(
            String=String, BoxedStr=BoxedStr, ArcStr=ArcStr, Int=Int, Float=Float
        )
        monkeypatch.setitem(sys.modules, name, module)
        for source in sources:
            exec(compile(source, f"<{name}>", "exec"), module.__dict__)
        return module

    return load
