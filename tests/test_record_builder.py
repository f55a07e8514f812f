import pytest

from structfactory import (
    InvalidIdentifierError,
    Record,
    RecordBuilderError,
    RecordRegistry,
    RecordTypeBuilder,
    create,
)


def test_build_produces_record_subclass():
    builder = RecordTypeBuilder(("x", "y"), "Point")
    Point = builder.build()

    assert issubclass(Point, Record)
    assert Point.members() == ("x", "y")
    assert Point._type_name == "Point"
    assert Point.__doc__ == "Point(x, y)"
    assert builder.built


def test_build_is_idempotent():
    builder = RecordTypeBuilder(("x",))

    assert builder.build() is builder.build()


def test_define_after_build_raises():
    builder = RecordTypeBuilder(("x",))
    builder.build()

    with pytest.raises(RecordBuilderError, match="already built"):
        builder.define("extra", 1)


def test_define_rejects_non_identifiers():
    builder = RecordTypeBuilder(("x",))

    with pytest.raises(InvalidIdentifierError):
        builder.define("not a name", 1)


def test_method_decorator_with_explicit_name():
    def extension(builder):
        @builder.method(name="double")
        def _double(self):
            return [v * 2 for v in self.each()]

    Pair = create("a", "b", extension=extension, registry=RecordRegistry())

    assert Pair(1, 2).double() == [2, 4]


def test_property_decorator():
    def extension(builder):
        @builder.property
        def total(self):
            return sum(self.each())

    Pair = create("a", "b", extension=extension, registry=RecordRegistry())

    assert Pair(1, 2).total == 3


def test_extension_can_override_equality():
    def extension(builder):
        @builder.method
        def equals(self, other):
            return isinstance(other, Record) and self.to_list() == other.to_list()

    Loose = create("x", extension=extension, registry=RecordRegistry())
    Other = create("x", registry=RecordRegistry())

    assert Loose(1) == Other(1)


def test_extension_can_override_field_accessor():
    def extension(builder):
        @builder.property
        def name(self):
            return self.get("name").upper()

    User = create("User", "name", extension=extension, registry=RecordRegistry())

    assert User("ann").name == "ANN"
    assert User("ann")["name"] == "ann"


def test_extension_members_can_keep_instance_state():
    def extension(builder):
        @builder.method
        def remember(self, note):
            self.note = note
            return self

    Item = create("Item", "id", extension=extension, registry=RecordRegistry())
    item = Item(1).remember("hello")

    assert item.note == "hello"
    assert item.to_list() == [1]
