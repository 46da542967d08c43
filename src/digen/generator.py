from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from digen.casing import lcfirst, ucfirst
from digen.settings import (
    DEFAULT_PACKAGE,
    DEFAULT_RECEIVER_NAME,
    DEFAULT_TYPE_NAME,
    GeneratorSettings,
)
from digen.templates.renderer import ContainerTemplateRenderer

if TYPE_CHECKING:
    from typing_extensions import Self

CREATE_METHOD_PREFIX = "New"
logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Anything generated code can be written to, e.g. ``sys.stdout`` or ``io.StringIO``."""

    def write(self, text: str, /) -> object: ...  # noqa: D102


@dataclass(slots=True)
class GeneratorOptions:
    """Container-wide generation options."""

    package: str = DEFAULT_PACKAGE
    imports: list[str] = field(default_factory=list)
    receiver_name: str = DEFAULT_RECEIVER_NAME
    type_name: str = DEFAULT_TYPE_NAME


@dataclass(frozen=True, slots=True)
class Dependency:
    """A named, typed value the generated container constructs and memoizes.

    ``type_expr`` and ``body`` are opaque source snippets and are emitted
    verbatim.
    """

    name: str
    type_expr: str
    body: str

    @property
    def field_name(self) -> str:
        """Return the private struct field name, e.g. ``alpha``."""
        return lcfirst(self.name)

    @property
    def accessor_method_name(self) -> str:
        """Return the memoizing accessor name, e.g. ``Alpha``."""
        return ucfirst(self.name)

    @property
    def create_method_name(self) -> str:
        """Return the create method name, e.g. ``NewAlpha``."""
        return f"{CREATE_METHOD_PREFIX}{ucfirst(self.name)}"


class Generator:
    """Build and render a lazily initialized dependency injection container.

    Each registered dependency produces a struct field, a ``New<Name>``
    create method returning a fresh instance, and a ``<Name>`` accessor that
    calls the create method once per container instance and caches the
    result in the field.

    Examples:
        .. code-block:: python

            Generator().add_imports("fmt").set_type_name("DIContainer").add_dependency(
                "configOption",
                "int",
                "{ return 10 }",
            ).generate()

    """

    def __init__(
        self,
        *,
        options: GeneratorOptions | None = None,
        renderer: ContainerTemplateRenderer | None = None,
    ) -> None:
        """Create a generator.

        Args:
            options: Initial options. Defaults to package ``main``, receiver
                ``c`` and type ``Container`` with no imports.
            renderer: Template renderer to use. A new one is created when omitted.

        """
        self._options = options if options is not None else GeneratorOptions()
        self._dependencies: list[Dependency] = []
        self._renderer = renderer if renderer is not None else ContainerTemplateRenderer()

    @classmethod
    def from_settings(cls, settings: GeneratorSettings | None = None) -> Self:
        """Create a generator seeded from ``DIGEN_*`` environment settings.

        Args:
            settings: Settings to use. Loaded from the environment when omitted.

        """
        resolved_settings = settings if settings is not None else GeneratorSettings()
        return cls(
            options=GeneratorOptions(
                package=resolved_settings.package,
                imports=list(resolved_settings.imports),
                receiver_name=resolved_settings.receiver_name,
                type_name=resolved_settings.type_name,
            ),
        )

    @property
    def options(self) -> GeneratorOptions:
        return self._options

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        return tuple(self._dependencies)

    def set_package(self, package: str) -> Self:
        """Override the package of the generated file. Default is ``main``."""
        self._options.package = package
        return self

    def add_imports(self, *paths: str) -> Self:
        """Append import paths, keeping earlier ones and the given order."""
        self._options.imports.extend(paths)
        return self

    def set_receiver_name(self, receiver_name: str) -> Self:
        """Override the receiver variable of generated methods. Default is ``c``."""
        self._options.receiver_name = receiver_name
        return self

    def set_type_name(self, type_name: str) -> Self:
        """Override the container struct name. Default is ``Container``."""
        self._options.type_name = type_name
        return self

    def add_dependency(self, name: str, type_expr: str, body: str) -> Self:
        """Register a dependency.

        Registration order is emission order. Names are not checked for
        uniqueness or syntax.

        Args:
            name: Base name used for the field, accessor and create method names.
            type_expr: Type of the field and return type of both methods.
            body: Literal body of the create method, braces included. It may
                call accessors of other dependencies through the receiver.

        """
        self._dependencies.append(Dependency(name=name, type_expr=type_expr, body=body))
        logger.debug("Registered dependency name=%r type_expr=%r", name, type_expr)
        return self

    def render(self) -> str:
        """Return the generated source without writing it anywhere.

        Raises:
            DigenTemplateError: If a bundled template fails to render.
            DigenEmptyIdentifierError: If a dependency name is empty.

        """
        return self._renderer.render(options=self._options, dependencies=self._dependencies)

    def fgenerate(self, sink: TextSink) -> None:
        """Write the generated source to ``sink``.

        The text is rendered in full before the single write, so nothing is
        written when rendering fails.
        """
        sink.write(self.render())

    def generate(self) -> None:
        """Write the generated source to standard output."""
        self.fgenerate(sys.stdout)
