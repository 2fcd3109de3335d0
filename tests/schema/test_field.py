"""Tests for column definition compilation."""

import pytest

from simple_migrations.schema.field import BlueprintField
from simple_migrations.types import FieldType


def make_field(field_type: FieldType = FieldType.INT, name: str = "id") -> BlueprintField:
    return BlueprintField().name(name).type(field_type)


def test_minimal_field() -> None:
    """Test a field with only name and type."""
    assert make_field().compile() == "`id` INT NOT NULL"


def test_str_matches_compile() -> None:
    field = make_field().size(11)

    assert str(field) == field.compile() == "`id` INT(11) NOT NULL"


def test_modifiers_return_same_instance() -> None:
    """Test that every modifier supports chaining."""
    field = BlueprintField()

    assert field.name("id") is field
    assert field.type(FieldType.INT) is field
    assert field.size(11) is field
    assert field.field_values(["a"]) is field
    assert field.nullable() is field
    assert field.auto_increment() is field
    assert field.unique() is field
    assert field.primary() is field
    assert field.default(1) is field
    assert field.comment("c") is field


def test_nullable_field() -> None:
    field = make_field(FieldType.VARCHAR, "nickname").size(64).nullable()

    assert field.compile() == "`nickname` VARCHAR(64) NULL"


def test_nullable_can_be_reset() -> None:
    field = make_field().nullable(True).nullable(False)

    assert field.compile() == "`id` INT NOT NULL"


def test_auto_increment_primary_key() -> None:
    field = make_field().size(11).auto_increment().primary()

    assert field.compile() == "`id` INT(11) NOT NULL AUTO_INCREMENT PRIMARY KEY"


def test_unique_key() -> None:
    field = make_field(FieldType.VARCHAR, "email").size(255).unique()

    assert field.compile() == "`email` VARCHAR(255) NOT NULL UNIQUE KEY"


def test_primary_wins_over_unique() -> None:
    """Test that a primary and unique field renders only PRIMARY KEY."""
    field = make_field().unique().primary()
    sql = field.compile()

    assert sql.endswith(" PRIMARY KEY")
    assert "UNIQUE" not in sql


def test_no_default_clause_when_unset() -> None:
    assert "DEFAULT" not in make_field().compile()


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "DEFAULT '0'"),
        ("", "DEFAULT ''"),
        ("active", "DEFAULT 'active'"),
        (2.5, "DEFAULT '2.5'"),
        (False, "DEFAULT '0'"),
        (True, "DEFAULT '1'"),
    ],
)
def test_default_value_rendered_quoted(value: object, expected: str) -> None:
    """Test that falsy defaults are still rendered, always quoted."""
    field = make_field(FieldType.VARCHAR, "status").default(value)

    assert expected in field.compile()
    assert field.has_default is True


def test_default_none_clears_default() -> None:
    field = make_field().default(5).default(None)

    assert field.has_default is False
    assert "DEFAULT" not in field.compile()


def test_comment_clause() -> None:
    field = make_field().comment("Primary identifier")

    assert field.compile() == "`id` INT NOT NULL COMMENT 'Primary identifier'"


def test_empty_comment_is_rendered() -> None:
    assert make_field().comment("").compile().endswith(" COMMENT ''")


def test_enumerated_values() -> None:
    field = make_field(FieldType.ENUM, "role").field_values(["admin", "user"])

    assert field.compile() == "`role` ENUM( 'admin', 'user' ) NOT NULL"


def test_values_take_precedence_over_size() -> None:
    """Test that values win when both size and values are set."""
    field = make_field(FieldType.SET, "flags").size(10).field_values(["a", "b"])

    assert field.compile() == "`flags` SET( 'a', 'b' ) NOT NULL"


def test_zero_size_renders_no_clause() -> None:
    assert make_field().size(0).compile() == "`id` INT NOT NULL"


def test_type_is_uppercased() -> None:
    field = BlueprintField().name("payload").type("json")

    assert field.compile() == "`payload` JSON NOT NULL"


def test_clause_order() -> None:
    """Test the full clause order of a column definition."""
    field = (
        make_field(FieldType.INT, "counter")
        .size(11)
        .nullable()
        .default(0)
        .auto_increment()
        .unique()
        .comment("hits")
    )

    assert field.compile() == (
        "`counter` INT(11) NULL DEFAULT '0' AUTO_INCREMENT UNIQUE KEY COMMENT 'hits'"
    )


def test_quotes_are_not_escaped() -> None:
    field = make_field(FieldType.VARCHAR, "name").size(10).default("O'Brien")

    assert "DEFAULT 'O'Brien'" in field.compile()
