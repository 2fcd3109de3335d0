"""Common type definitions for simple-migrations."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

DatabaseParamType: TypeAlias = dict[str, Any] | list[Any] | tuple[Any, ...] | None


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Engine(str, Enum):
    """Storage engines supported by the MySQL family."""

    INNODB = "InnoDB"
    XTRADB = "XtraDB"
    ARIA = "Aria"
    MYISAM = "MyISAM"
    MYROCKS = "MyRocks"
    ARCHIVE = "Archive"
    BLACKHOLE = "BLACKHOLE"

    @classmethod
    def _missing_(cls, value: object) -> "Engine | None":
        # MySQL matches engine names case-insensitively
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class FieldType(str, Enum):
    """Column type tags."""

    # Numeric
    TINYINT = "tinyint"
    SMALLINT = "smallint"
    MEDIUMINT = "mediumint"
    INT = "int"
    BIGINT = "bigint"
    DECIMAL = "decimal"
    FLOAT = "float"
    DOUBLE = "double"
    BIT = "bit"

    # Text and binary
    CHAR = "char"
    VARCHAR = "varchar"
    TINYTEXT = "tinytext"
    TEXT = "text"
    MEDIUMTEXT = "mediumtext"
    LONGTEXT = "longtext"
    BINARY = "binary"
    VARBINARY = "varbinary"
    TINYBLOB = "tinyblob"
    BLOB = "blob"
    MEDIUMBLOB = "mediumblob"
    LONGBLOB = "longblob"
    ENUM = "enum"
    SET = "set"

    # Date and time
    DATE = "date"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    YEAR = "year"

    # Documents
    JSON = "json"


@dataclass(frozen=True)
class Size:
    """Numeric length argument of a column, e.g. ``VARCHAR(255)``."""

    value: int


@dataclass(frozen=True)
class Values:
    """Allowed values of an ``ENUM`` or ``SET`` column."""

    items: Sequence[str]


FieldLength: TypeAlias = Size | Values | None
