"""Column definition builder."""

from collections.abc import Sequence
from typing import Any

from simple_migrations.types import FieldType

_UNSET: Any = object()


class BlueprintField:
    """A single column of a table blueprint.

    Every modifier records its value and returns the field so calls can be
    chained::

        table.varchar("email", 255).unique().comment("login")

    Nothing is validated here. Conflicting settings are resolved when the
    field is compiled: enumerated values win over a size and ``PRIMARY KEY``
    wins over ``UNIQUE KEY``.
    """

    def __init__(self) -> None:
        self._name: str = ""
        self._type: FieldType | str = ""
        self._size: int | None = None
        self._field_values: list[str] | None = None
        self._nullable = False
        self._auto_increment = False
        self._unique = False
        self._primary = False
        self._default: Any = _UNSET
        self._comment: str | None = None

    def name(self, value: str) -> "BlueprintField":
        """Set the column name."""
        self._name = value
        return self

    def type(self, value: FieldType | str) -> "BlueprintField":
        """Set the column type."""
        self._type = value
        return self

    def size(self, value: int) -> "BlueprintField":
        """Set the column length, e.g. 255 for ``VARCHAR(255)``."""
        self._size = value
        return self

    def field_values(self, value: Sequence[str]) -> "BlueprintField":
        """Set the allowed values of an ``ENUM`` or ``SET`` column."""
        self._field_values = list(value)
        return self

    def nullable(self, value: bool = True) -> "BlueprintField":
        self._nullable = value
        return self

    def auto_increment(self, value: bool = True) -> "BlueprintField":
        self._auto_increment = value
        return self

    def unique(self, value: bool = True) -> "BlueprintField":
        self._unique = value
        return self

    def primary(self, value: bool = True) -> "BlueprintField":
        self._primary = value
        return self

    def default(self, value: Any) -> "BlueprintField":
        """Set the default value.

        Falsy values such as ``0`` or ``""`` are real defaults. Passing
        ``None`` removes a previously set default.
        """
        self._default = _UNSET if value is None else value
        return self

    def comment(self, value: str) -> "BlueprintField":
        """Set the column comment."""
        self._comment = value
        return self

    @property
    def field_name(self) -> str:
        return self._name

    @property
    def field_type(self) -> FieldType | str:
        return self._type

    @property
    def has_default(self) -> bool:
        return self._default is not _UNSET

    def compile(self) -> str:
        """Compile the field into a column definition.

        Returns:
            Column definition, e.g. ```id` INT(11) NOT NULL PRIMARY KEY``
        """
        type_name = (
            self._type.value if isinstance(self._type, FieldType) else self._type
        ).upper()

        sql = f"`{self._name}` {type_name}{self._compile_length()}"
        sql += " NULL" if self._nullable else " NOT NULL"

        if self.has_default:
            sql += f" DEFAULT '{_literal(self._default)}'"

        if self._auto_increment:
            sql += " AUTO_INCREMENT"

        if self._primary:
            sql += " PRIMARY KEY"
        elif self._unique:
            sql += " UNIQUE KEY"

        if self._comment is not None:
            sql += f" COMMENT '{self._comment}'"

        return sql

    def _compile_length(self) -> str:
        if self._field_values is not None:
            values = ", ".join(f"'{value}'" for value in self._field_values)
            return f"( {values} )"
        if self._size:
            return f"({self._size})"
        return ""

    def __str__(self) -> str:
        return self.compile()

    def __repr__(self) -> str:
        return f"BlueprintField({self.compile()!r})"


def _literal(value: Any) -> str:
    # Quotes are not escaped, callers supply safe literals.
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
