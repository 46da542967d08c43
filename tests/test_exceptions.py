"""Tests for custom exception hierarchy."""

import pytest

from digen.exceptions import DigenEmptyIdentifierError, DigenError, DigenTemplateError
from digen.generator import Generator


@pytest.mark.parametrize("error_type", [DigenTemplateError, DigenEmptyIdentifierError])
def test_errors_share_digen_base_class(error_type: type[Exception]) -> None:
    assert issubclass(error_type, DigenError)


def test_empty_identifier_error_is_value_error() -> None:
    assert issubclass(DigenEmptyIdentifierError, ValueError)


class TestDigenEmptyIdentifierError:
    def test_raised_on_render_of_unnamed_dependency(self) -> None:
        generator = Generator().add_dependency("", "*A", "{ return &A{} }")

        with pytest.raises(DigenError) as exc_info:
            generator.render()

        assert isinstance(exc_info.value, DigenEmptyIdentifierError)
        assert "empty identifier" in str(exc_info.value)

    def test_registration_of_unnamed_dependency_is_not_validated(self) -> None:
        generator = Generator().add_dependency("", "*A", "{ return &A{} }")

        assert generator.dependencies[0].name == ""
