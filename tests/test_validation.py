import pytest

from structfactory.core.exceptions import EmptyDeclarationError, InvalidIdentifierError
from structfactory.core.validation import is_type_name, split_declaration


def test_is_type_name():
    assert is_type_name("Point")
    assert is_type_name(" Point")
    assert not is_type_name("point")
    assert not is_type_name("")
    assert not is_type_name(1)


def test_split_declaration_extracts_type_name_once():
    assert split_declaration(("Point", "x", "y")) == ("Point", ("x", "y"))
    assert split_declaration(("Point", "Label", "x")) == ("Point", ("Label", "x"))
    assert split_declaration(("x", "y")) == (None, ("x", "y"))


def test_split_declaration_strips_type_name():
    assert split_declaration((" Point ", "x")) == ("Point", ("x",))


def test_split_declaration_rejects_invalid_type_name():
    with pytest.raises(InvalidIdentifierError, match="type name"):
        split_declaration(("Not Valid", "x"))


def test_split_declaration_empty():
    with pytest.raises(EmptyDeclarationError):
        split_declaration(())


def test_invalid_identifier_error_carries_details():
    with pytest.raises(InvalidIdentifierError) as exc:
        split_declaration(("x", 3))

    assert exc.value.identifier == 3
    assert "needs to be a bare identifier" in str(exc.value)
    assert isinstance(exc.value, ValueError)
