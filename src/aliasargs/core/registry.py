# core/registry.py
"""Typed alias registry and flag parser"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from aliasargs.core.labels import split_flag
from aliasargs.core.values import Value, ValueType
from aliasargs.errors import (
    DuplicateAliasError,
    KeyNotFoundError,
    TypeCoercionError,
    UnrecognizedLabelError,
)
from aliasargs.utils.logging_manager import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AliasGroup:
    """Aliases that name one logical argument and share its value"""
    aliases: tuple[str, ...]
    documentation: str
    value_type: ValueType


class LabelRegistry:
    """
    Registry of alias groups, each bound to one value type.

    Every alias maps to the index of its group, and values are stored per
    group, so a write through any alias is a write to the whole group.

    Example:
        registry = LabelRegistry()
        registry.register(["count", "c"], "how many", ValueType.INT)
        registry.parse(["-c", "3"])
        registry.get_int("count")  # 3
    """

    def __init__(self):
        self._groups: list[AliasGroup] = []
        self._group_ids: dict[str, int] = {}
        self._values: dict[int, Value] = {}
        # Documentation text -> group id, last registration wins
        self._menu: dict[str, int] = {}

    # === Registration ===

    def has_alias(self, alias: str) -> bool:
        """Return True if an alias is already in use"""
        return alias in self._group_ids

    @property
    def aliases(self) -> list[str]:
        """All registered aliases in registration order"""
        return list(self._group_ids)

    @property
    def groups(self) -> list[AliasGroup]:
        return list(self._groups)

    def register(self, aliases: Sequence[str], doc: str, value_type: ValueType) -> None:
        """
        Add a group of aliases for a new argument.

        Args:
            aliases: Names the argument can be given by
            doc: Description shown in help output
            value_type: Type every value of the group is coerced to

        Raises:
            DuplicateAliasError: If an alias is already registered or repeated
        """
        aliases = tuple(aliases)
        seen = set()
        for alias in aliases:
            if alias in seen or self.has_alias(alias):
                raise DuplicateAliasError(alias)
            seen.add(alias)

        group_id = len(self._groups)
        self._groups.append(AliasGroup(aliases, doc, value_type))
        for alias in aliases:
            self._group_ids[alias] = group_id
        self._menu[doc] = group_id

        logger.debug(f"Registered {value_type.value} argument {list(aliases)}")

    def set(self, aliases: Sequence[str], value: Value) -> None:
        """
        Set the value of the group the aliases belong to.

        No validation is done beyond finding the group; callers pass values
        of the group's type.
        """
        group_id = self._find_group(aliases)
        if group_id is None:
            raise UnrecognizedLabelError(", ".join(aliases))
        self._values[group_id] = value

    def _find_group(self, aliases: Sequence[str]) -> Optional[int]:
        for alias in aliases:
            if alias in self._group_ids:
                return self._group_ids[alias]
        return None

    # === Parsing ===

    def parse(self, tokens: Sequence[str], strict: bool = False) -> None:
        """
        Parse command line flags into the registry.

        The tokens follow the program and subcommand names. These forms are
        equivalent for a label 'label' and value 'val':
            -label val, --label val, -label=val, --label=val
        A boolean label may also be given alone to set it to true. When
        several aliases of a group appear, the last one wins.

        Tokens that are not flags, flags with unknown labels and values that
        cannot be coerced are skipped.

        Args:
            tokens: Argument vector after the subcommand name
            strict: Raise on values that cannot be coerced instead of skipping

        Raises:
            TypeCoercionError: Only in strict mode
        """
        cursor = 0
        while cursor < len(tokens):
            flag = split_flag(tokens[cursor])
            if flag is None:
                logger.debug(f"Skipping non-flag token '{tokens[cursor]}'")
                cursor += 1
            elif flag.value is not None:
                self._try_to_use_flag(flag.label, flag.value, strict)
                cursor += 1
            elif cursor < len(tokens) - 1:
                if self._try_to_use_flag(flag.label, tokens[cursor + 1], strict):
                    cursor += 2
                else:
                    cursor += 1
            else:
                self._try_to_use_flag(flag.label, "", strict)
                cursor += 1

    def _try_to_use_flag(self, label: str, possible_value: str, strict: bool) -> bool:
        """Bind a value to a label, reporting whether it was used"""
        try:
            self.bind(label, possible_value)
        except UnrecognizedLabelError:
            logger.debug(f"Label '{label}' is not handled here")
            return False
        except TypeCoercionError as e:
            if strict:
                raise
            logger.debug(f"Ignoring value: {e}")
            return False
        return True

    def bind(self, label: str, possible_value: str) -> Value:
        """
        Coerce a value for a label and store it for the label's group.

        Returns:
            The stored value

        Raises:
            UnrecognizedLabelError: If no group has the label
            TypeCoercionError: If the value does not parse as the group's type
        """
        group_id = self._group_ids.get(label)
        if group_id is None:
            raise UnrecognizedLabelError(label)

        group = self._groups[group_id]
        value = group.value_type.coerce(label, possible_value)
        self._values[group_id] = value
        return value

    # === Lookup ===

    def is_set(self, alias: str) -> bool:
        group_id = self._group_ids.get(alias)
        return group_id is not None and group_id in self._values

    def get(self, alias: str, value_type: ValueType) -> Value:
        """
        Get the value of an alias bound to the given type.

        Raises:
            KeyNotFoundError: If the alias is unknown, bound to another
                type, or has no value yet
        """
        group_id = self._group_ids.get(alias)
        if (
            group_id is None
            or self._groups[group_id].value_type is not value_type
            or group_id not in self._values
        ):
            raise KeyNotFoundError(alias, value_type.value)
        return self._values[group_id]

    def get_int(self, alias: str) -> int:
        return self.get(alias, ValueType.INT)

    def get_float(self, alias: str) -> float:
        return self.get(alias, ValueType.FLOAT)

    def get_str(self, alias: str) -> str:
        return self.get(alias, ValueType.STR)

    def get_bool(self, alias: str) -> bool:
        return self.get(alias, ValueType.BOOL)

    def values(self) -> dict[str, Any]:
        """Snapshot of every alias that currently has a value"""
        return {
            alias: self._values[group_id]
            for alias, group_id in self._group_ids.items()
            if group_id in self._values
        }

    # === Help ===

    def help_text(self) -> str:
        """One line per documented argument: its aliases, a tab, the text"""
        lines = []
        for doc, group_id in self._menu.items():
            labels = ",".join(f" --{alias}" for alias in self._groups[group_id].aliases)
            lines.append(f"{labels}\t{doc}\n")
        return "".join(lines)

    def __len__(self) -> int:
        return len(self._groups)
