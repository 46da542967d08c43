"""Shared pytest fixtures for digen tests."""

import pytest

from digen.generator import Generator
from digen.templates.renderer import ContainerTemplateRenderer


@pytest.fixture()
def generator() -> Generator:
    """Generator with default options and no dependencies."""
    return Generator()


@pytest.fixture()
def renderer() -> ContainerTemplateRenderer:
    """Fresh container template renderer."""
    return ContainerTemplateRenderer()
