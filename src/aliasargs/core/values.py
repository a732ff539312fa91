# core/values.py
"""Value types an alias group can be bound to"""

import re
from enum import Enum
from typing import Any, Union

from aliasargs.errors import TypeCoercionError

Value = Union[int, float, str, bool]

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ValueType(Enum):
    """Closed set of argument value types"""

    INT = "integer"
    FLOAT = "float"
    STR = "string"
    BOOL = "boolean"

    def coerce(self, label: str, raw: str) -> Value:
        """
        Convert raw command line text to a value of this type.

        Args:
            label: Label the text was given for (used in errors)
            raw: Text taken from the argument vector

        Returns:
            The converted value

        Raises:
            TypeCoercionError: If the text is not a valid number for INT/FLOAT
        """
        if self is ValueType.INT:
            if not _INT_PATTERN.fullmatch(raw):
                raise TypeCoercionError(label, raw, self.value)
            value = int(raw)
            if not INT_MIN <= value <= INT_MAX:
                raise TypeCoercionError(label, raw, self.value)
            return value

        if self is ValueType.FLOAT:
            # float() tolerates padding and digit separators, command lines do not
            if not raw or raw != raw.strip() or "_" in raw:
                raise TypeCoercionError(label, raw, self.value)
            try:
                return float(raw)
            except ValueError:
                raise TypeCoercionError(label, raw, self.value) from None

        if self is ValueType.BOOL:
            # Presence alone switches a flag on
            return raw != "false"

        return raw

    def accepts(self, value: Any) -> bool:
        """Check whether a Python value can be stored for this type"""
        if self is ValueType.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is ValueType.FLOAT:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is ValueType.BOOL:
            return isinstance(value, bool)
        return isinstance(value, str)

    def normalise(self, value: Value) -> Value:
        """Convert an accepted value to its canonical Python type"""
        if self is ValueType.FLOAT:
            return float(value)
        return value

    @classmethod
    def from_python(cls, python_type: type) -> "ValueType":
        """Map a builtin type (int, float, str, bool) to a ValueType"""
        mapping = {int: cls.INT, float: cls.FLOAT, str: cls.STR, bool: cls.BOOL}
        try:
            return mapping[python_type]
        except KeyError:
            raise TypeError(f"Unsupported argument type: {python_type!r}") from None
