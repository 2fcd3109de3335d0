"""Table blueprint: collects columns and indexes and compiles them to DDL."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from simple_migrations.schema.field import BlueprintField
from simple_migrations.types import Engine, FieldLength, FieldType, Size, Values


@dataclass
class BlueprintOptions:
    """Table level options of a blueprint."""

    name: str
    engine: Engine | str | None = None
    charset: str | None = None
    collate: str | None = None


@dataclass
class BlueprintIndex:
    """Unique index declaration."""

    name: str
    fields: list[str] = field(default_factory=list)


def _size(size: int | None) -> FieldLength:
    return Size(size) if size is not None else None


class Blueprint:
    """Mutable description of a single table.

    Column factory methods are named after the MySQL types they create.
    ``int_``, ``float_`` and ``set_`` carry a trailing underscore so they do
    not shadow the builtins.
    """

    def __init__(self, options: BlueprintOptions) -> None:
        """Initialize blueprint.

        Args:
            options: Table name and default table options
        """
        self._options = options
        self.engine = options.engine
        self._fields: list[BlueprintField] = []
        self._unique_indexes: list[BlueprintIndex] = []

    def _create_field(
        self, field_type: FieldType, name: str, length: FieldLength = None
    ) -> BlueprintField:
        column = BlueprintField().name(name).type(field_type)

        if isinstance(length, Values):
            column.field_values(length.items)
        elif isinstance(length, Size):
            column.size(length.value)

        self._fields.append(column)
        return column

    # Integer fields

    def tinyint(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.TINYINT, name, _size(size))

    def smallint(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.SMALLINT, name, _size(size))

    def mediumint(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.MEDIUMINT, name, _size(size))

    def int_(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.INT, name, _size(size))

    def bigint(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.BIGINT, name, _size(size))

    def decimal(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.DECIMAL, name, _size(size))

    def float_(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.FLOAT, name, _size(size))

    def double(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.DOUBLE, name, _size(size))

    def bit(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.BIT, name, _size(size))

    # Text fields

    def char(self, name: str, size: int) -> BlueprintField:
        return self._create_field(FieldType.CHAR, name, Size(size))

    def varchar(self, name: str, size: int) -> BlueprintField:
        return self._create_field(FieldType.VARCHAR, name, Size(size))

    def tinytext(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.TINYTEXT, name, _size(size))

    def text(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.TEXT, name, _size(size))

    def mediumtext(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.MEDIUMTEXT, name, _size(size))

    def longtext(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.LONGTEXT, name, _size(size))

    def binary(self, name: str, size: int) -> BlueprintField:
        return self._create_field(FieldType.BINARY, name, Size(size))

    def varbinary(self, name: str, size: int) -> BlueprintField:
        return self._create_field(FieldType.VARBINARY, name, Size(size))

    def tinyblob(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.TINYBLOB, name, _size(size))

    def blob(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.BLOB, name, _size(size))

    def mediumblob(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.MEDIUMBLOB, name, _size(size))

    def longblob(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.LONGBLOB, name, _size(size))

    def enum(self, name: str, values: Sequence[str]) -> BlueprintField:
        return self._create_field(FieldType.ENUM, name, Values(values))

    def set_(self, name: str, values: Sequence[str]) -> BlueprintField:
        return self._create_field(FieldType.SET, name, Values(values))

    # Dates and time

    def date(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.DATE, name, _size(size))

    def datetime(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.DATETIME, name, _size(size))

    def timestamp(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.TIMESTAMP, name, _size(size))

    def time(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.TIME, name, _size(size))

    def year(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.YEAR, name, _size(size))

    # Documents

    def json(self, name: str, size: int | None = None) -> BlueprintField:
        return self._create_field(FieldType.JSON, name, _size(size))

    @property
    def name(self) -> str:
        return self._options.name

    @property
    def fields(self) -> list[BlueprintField]:
        return list(self._fields)

    @property
    def unique_indexes(self) -> list[BlueprintIndex]:
        return list(self._unique_indexes)

    @property
    def engine(self) -> Engine | None:
        return self._options.engine

    @engine.setter
    def engine(self, value: Engine | str | None) -> None:
        self._options.engine = Engine(value) if value else None

    @property
    def charset(self) -> str | None:
        return self._options.charset

    @charset.setter
    def charset(self, value: str | None) -> None:
        self._options.charset = value

    @property
    def collate(self) -> str | None:
        return self._options.collate

    @collate.setter
    def collate(self, value: str | None) -> None:
        self._options.collate = value

    def add_unique_index(self, name: str, fields: Sequence[str]) -> None:
        """Declare a unique index.

        Field names are not checked against the declared columns.

        Args:
            name: Index name
            fields: Ordered column names covered by the index
        """
        self._unique_indexes.append(BlueprintIndex(name=name, fields=list(fields)))

    def compile_sql(self) -> list[str]:
        """Compile the blueprint to SQL statements.

        Returns:
            ``CREATE TABLE`` statement followed by one ``CREATE UNIQUE INDEX``
            statement per declared unique index
        """
        columns_sql = ", ".join(column.compile() for column in self._fields)

        table_sql = f"CREATE TABLE {self.name} ( {columns_sql} ) "
        if self._options.engine:
            table_sql += f"ENGINE = {self._options.engine.value}"
        if self._options.charset:
            table_sql += f" CHARACTER SET = {self._options.charset}"
        if self._options.collate:
            table_sql += f" COLLATE = {self._options.collate}"

        return [f"{table_sql};", *self._compile_indexes()]

    def _compile_indexes(self) -> list[str]:
        return [
            f"CREATE UNIQUE INDEX {index.name} ON {self.name} "
            f"( {', '.join(index.fields)} );"
            for index in self._unique_indexes
        ]
