"""Record decoder tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import NamedTuple

import pytest
from fixed_length_reader.errors import ArgumentError, FixedLengthError
from fixed_length_reader.record_decoding import RecordDecoder
from fixed_length_reader.schema_management import (
    ConstructionStyle,
    FieldSchema,
    ShapeField,
    define_shape,
)
from fixed_length_reader.value_conversion import ConverterRegistry, FieldType


class Person:
    def __init__(self) -> None:
        self.name: str | None = None
        self.surname: str | None = None
        self.age = 0
        self.note = "unchanged"


class PersonRecord(NamedTuple):
    name: str | None
    surname: str | None
    age: int
    note: str | None


class PersonWithoutDefaultConstructor:
    def __init__(self, name, surname, age, note) -> None:
        self.name = name
        self.surname = surname
        self.age = age
        self.note = note


@dataclass
class Defaults:
    name: str | None = None
    default_int: int = -1
    default_float: float = -1.0
    default_bool: bool = True
    default_char: str = "?"
    default_text: str | None = "?"


def _person_fields(trim: bool = True) -> list[ShapeField]:
    return [
        ShapeField("name", FieldType.STR, FieldSchema(offset=0, length=10, trim=trim)),
        ShapeField("surname", FieldType.STR, FieldSchema(offset=10, length=10, trim=trim)),
        ShapeField("age", FieldType.INT32, FieldSchema(offset=20, length=3)),
        ShapeField("note", FieldType.STR),
    ]


@pytest.fixture
def decoder() -> RecordDecoder:
    return RecordDecoder("utf-8", ConverterRegistry())


def test_decodes_mutable_target(decoder: RecordDecoder) -> None:
    person = decoder.decode("John      Doe       25 ", define_shape(Person, _person_fields()), 1)

    assert isinstance(person, Person)
    assert person.name == "John"
    assert person.surname == "Doe"
    assert person.age == 25
    assert person.note == "unchanged"


def test_decodes_immutable_target_with_zero_value_for_passthrough(
    decoder: RecordDecoder,
) -> None:
    person = decoder.decode(
        "John      Doe       25 ", define_shape(PersonRecord, _person_fields()), 1
    )

    assert person == PersonRecord("John", "Doe", 25, None)


def test_falls_back_to_full_argument_constructor(decoder: RecordDecoder) -> None:
    shape = define_shape(PersonWithoutDefaultConstructor, _person_fields())

    person = decoder.decode("John      Doe       25 ", shape, 1)

    assert (person.name, person.surname, person.age, person.note) == ("John", "Doe", 25, None)


def test_mutable_and_immutable_decoding_agree(decoder: RecordDecoder) -> None:
    line = "  Jane    Roe       41 "
    mutable = decoder.decode(line, define_shape(Person, _person_fields()), 3)
    immutable = decoder.decode(line, define_shape(PersonRecord, _person_fields()), 3)

    assert (mutable.name, mutable.surname, mutable.age) == (
        immutable.name,
        immutable.surname,
        immutable.age,
    )


def test_untrimmed_fields_keep_padding(decoder: RecordDecoder) -> None:
    person = decoder.decode(
        "  John    Doe       25 ", define_shape(Person, _person_fields(trim=False)), 1
    )

    assert person.name == "  John    "
    assert person.surname == "Doe       "


def test_trimming_removes_nul_fill_and_keeps_ideographic_space(decoder: RecordDecoder) -> None:
    line = "John" + "\x00" * 6 + "\u3000Doe    " + "025"

    person = decoder.decode(line, define_shape(Person, _person_fields()), 1)

    assert person.name == "John"
    assert person.surname == "\u3000Doe"
    assert person.age == 25


def test_trimming_is_idempotent(decoder: RecordDecoder) -> None:
    shape = define_shape(Person, _person_fields())
    once = decoder.decode("  John    Doe       25 ", shape, 1)
    twice = decoder.decode(f"{once.name:<10}{once.surname:<10} 25 ", shape, 1)

    assert (twice.name, twice.surname) == (once.name, once.surname)


def test_passthrough_zero_values_for_immutable_targets(decoder: RecordDecoder) -> None:
    shape = define_shape(
        Defaults,
        [
            ShapeField("name", FieldType.STR, FieldSchema(offset=0, length=4)),
            ShapeField("default_int", FieldType.INT64),
            ShapeField("default_float", FieldType.FLOAT32),
            ShapeField("default_bool", FieldType.BOOL),
            ShapeField("default_char", FieldType.CHAR),
            ShapeField("default_text", FieldType.STR),
        ],
        ConstructionStyle.IMMUTABLE,
    )

    value = decoder.decode("John", shape, 1)

    assert value == Defaults("John", 0, 0.0, False, "\x00", None)


def test_decodes_temporal_and_decimal_fields(decoder: RecordDecoder) -> None:
    @dataclass
    class Event:
        day: date | None = None
        at: datetime | None = None
        amount: Decimal | None = None
        flag: bool = False

    shape = define_shape(
        Event,
        [
            ShapeField("day", FieldType.DATE, FieldSchema(0, 10, format="yyyy-MM-dd")),
            ShapeField("at", FieldType.DATETIME, FieldSchema(10, 14)),
            ShapeField("amount", FieldType.DECIMAL, FieldSchema(24, 8)),
            ShapeField("flag", FieldType.BOOL, FieldSchema(32, 1)),
        ],
    )

    event = decoder.decode("2023-12-2520231225143000  123.45Y", shape, 1)

    assert event == Event(
        date(2023, 12, 25), datetime(2023, 12, 25, 14, 30), Decimal("123.45"), True
    )


def test_conversion_failure_reports_field_and_line(decoder: RecordDecoder) -> None:
    line = "John      Doe       abc"

    with pytest.raises(FixedLengthError) as excinfo:
        decoder.decode(line, define_shape(Person, _person_fields()), 7)

    error = excinfo.value
    assert error.line_number == 7
    assert error.field_name == "age"
    assert error.original_line == line
    assert isinstance(error.__cause__, ArgumentError)


def test_short_line_reports_caller_line_number(decoder: RecordDecoder) -> None:
    with pytest.raises(FixedLengthError) as excinfo:
        decoder.decode("John", define_shape(PersonRecord, _person_fields()), 42)

    assert excinfo.value.line_number == 42
    assert excinfo.value.field_name == "name"
    assert isinstance(excinfo.value.__cause__, IndexError)


def test_constructor_failure_is_wrapped_without_field_name(decoder: RecordDecoder) -> None:
    class Broken:
        def __init__(self) -> None:
            raise RuntimeError("no instances")

    shape = define_shape(Broken, [ShapeField("name", FieldType.STR, FieldSchema(0, 4))])

    with pytest.raises(FixedLengthError) as excinfo:
        decoder.decode("John", shape, 5)

    assert excinfo.value.field_name is None
    assert excinfo.value.line_number == 5
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_custom_converter_for_blank_integers() -> None:
    registry = ConverterRegistry()
    registry.register(FieldType.OPTIONAL_INT32, lambda value, _format: int(value or 0))
    decoder = RecordDecoder("utf-8", registry)
    shape = define_shape(
        Defaults,
        [ShapeField("default_int", FieldType.OPTIONAL_INT32, FieldSchema(0, 4, trim=True))],
    )

    assert decoder.decode("    ", shape, 1).default_int == 0


def test_unsupported_field_type_is_a_field_error(decoder: RecordDecoder) -> None:
    shape = define_shape(
        Defaults, [ShapeField("default_char", FieldType.CHAR, FieldSchema(0, 1))]
    )

    with pytest.raises(FixedLengthError) as excinfo:
        decoder.decode("A", shape, 1)

    assert excinfo.value.field_name == "default_char"


def test_multibyte_fields_are_sliced_by_bytes() -> None:
    decoder = RecordDecoder("cp932", ConverterRegistry())
    shape = define_shape(Person, _person_fields())

    person = decoder.decode("山田      太郎      030", shape, 1)

    assert person.name == "山田"
    assert person.surname == "太郎"
    assert person.age == 30


@pytest.mark.parametrize(("line", "use_shape"), [(None, True), ("John", False)])
def test_missing_arguments_raise_argument_error(
    decoder: RecordDecoder, line, use_shape: bool
) -> None:
    shape = define_shape(Person, _person_fields()) if use_shape else None

    with pytest.raises(ArgumentError):
        decoder.decode(line, shape, 1)


@pytest.mark.parametrize(
    ("encoding", "registry"),
    [(None, ConverterRegistry()), ("utf-8", None), ("bogus", ConverterRegistry())],
)
def test_constructor_rejects_missing_collaborators(encoding, registry) -> None:
    with pytest.raises(ArgumentError):
        RecordDecoder(encoding, registry)
