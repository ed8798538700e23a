import pytest

from specimen.errors import (
    CreationFailedError,
    DuplicateProviderError,
    FieldNotFoundError,
    OverrideNotFoundError,
    ProviderNotFoundError,
    SpecimenError,
)


class MyType:
    pass


@pytest.mark.parametrize(
    "error",
    [
        CreationFailedError("MyType", None),
        DuplicateProviderError(MyType),
        FieldNotFoundError("field"),
        OverrideNotFoundError("field"),
        ProviderNotFoundError(MyType),
    ],
)
def test_errors_share_base_class(error):
    assert isinstance(error, SpecimenError)


def test_lookup_errors_are_lookup_errors():
    assert isinstance(ProviderNotFoundError(MyType), LookupError)
    assert isinstance(FieldNotFoundError("f"), LookupError)
    assert isinstance(OverrideNotFoundError("f"), LookupError)


def test_creation_failed_default_messages():
    named = CreationFailedError("MyType", "MyProvider")
    default = CreationFailedError(MyType, None)

    assert str(named) == "Creation failed for type MyType using provider named MyProvider"
    assert str(default) == "Creation failed for type MyType using default provider"
    assert (named.type, named.name) == ("MyType", "MyProvider")
    assert default.name is None


def test_creation_failed_custom_message():
    assert str(CreationFailedError("MyType", "p", "Custom error message")) == "Custom error message"


def test_provider_not_found_messages():
    assert str(ProviderNotFoundError(MyType)) == "No default provider for type MyType is registered"
    assert (
        str(ProviderNotFoundError(MyType, "admin"))
        == "No provider named admin for type MyType is registered"
    )
    assert str(ProviderNotFoundError(None, "cart", array=True)) == (
        "No array provider named cart is registered"
    )


def test_duplicate_provider_carries_key():
    error = DuplicateProviderError(MyType, "admin")

    assert error.type is MyType
    assert error.name == "admin"
    assert not error.array
    assert "overriding=True" in str(error)
