from typing import Dict, Iterator, Tuple

from tips.errors import TipsError, DeclarationError
from tips.types import ErrorVal, Value, coerce, default_value


class Environment:
    """The symbol table of one TIPS run.

    Maps each declared identifier to a slot whose variant (INTEGER or
    REAL) is fixed when it is declared. Slots are created only while the
    VAR section is parsed; once the parser seals the environment every
    later access reads or overwrites an existing slot.
    """
    def __init__(self):
        self.values: Dict[str, Value] = {}
        self.types: Dict[str, str] = {}
        self.sealed = False

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def items(self) -> Iterator[Tuple[str, Value]]:
        return iter(self.values.items())

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise TipsError(ErrorVal('NameError', f'undeclared identifier {name}'))

    def type_of(self, name: str) -> str:
        if name in self.types:
            return self.types[name]
        raise TipsError(ErrorVal('NameError', f'undeclared identifier {name}'))

    def set(self, name: str, value: Value) -> Value:
        """Overwrite a slot, converting ``value`` to the slot's variant."""
        kind = self.type_of(name)
        try:
            stored = coerce(value, kind)
        except ValueError as e:
            raise TipsError(ErrorVal('ArithmeticError', str(e)))
        self.values[name] = stored
        return stored

    def declare(self, name: str, kind: str):
        if self.sealed:
            raise DeclarationError(f'cannot declare {name} after the VAR section')
        if name in self.values:
            raise DeclarationError(f'duplicate declaration of {name}')
        self.values[name] = default_value(kind)
        self.types[name] = kind

    def seal(self):
        self.sealed = True
