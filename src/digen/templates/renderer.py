from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from digen.exceptions import DigenTemplateError
from digen.templates.templates import (
    IMPORTS_TEMPLATE,
    METHODS_TEMPLATE,
    PACKAGE_TEMPLATE,
    TYPE_TEMPLATE,
)

if TYPE_CHECKING:
    from digen.generator import Dependency, GeneratorOptions

_INDENT = "\t"
_SECTION_SEPARATOR = "\n\n"
logger = logging.getLogger(__name__)


class ContainerTemplateRenderer:
    """Renderer for generated container code."""

    def __init__(self) -> None:
        self._env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._package_template = self._template(PACKAGE_TEMPLATE)
        self._imports_template = self._template(IMPORTS_TEMPLATE)
        self._type_template = self._template(TYPE_TEMPLATE)
        self._methods_template = self._template(METHODS_TEMPLATE)

    def render(
        self,
        *,
        options: GeneratorOptions,
        dependencies: Sequence[Dependency],
    ) -> str:
        """Render the container source for the given configuration.

        Stages are emitted in a fixed order, each followed by a blank line:
        package clause, import clause (only when imports are present), struct
        declaration, and create/accessor method pairs (only when dependencies
        are present).

        Args:
            options: Package, imports, receiver and type name of the container.
            dependencies: Dependencies in emission order.

        Raises:
            DigenTemplateError: If a bundled template fails to render.
            DigenEmptyIdentifierError: If a dependency name is empty.

        """
        self._log_render_summary(options=options, dependencies=dependencies)

        sections = [self._render_package(options=options)]
        if options.imports:
            sections.append(self._render_imports(options=options))
        sections.append(self._render_type(options=options, dependencies=dependencies))
        if dependencies:
            sections.append(self._render_methods(options=options, dependencies=dependencies))

        return "".join(f"{section}{_SECTION_SEPARATOR}" for section in sections)

    def _render_package(self, *, options: GeneratorOptions) -> str:
        return self._render_template(self._package_template, package=options.package)

    def _render_imports(self, *, options: GeneratorOptions) -> str:
        return self._render_template(
            self._imports_template,
            imports=list(options.imports),
            indent=_INDENT,
        )

    def _render_type(
        self,
        *,
        options: GeneratorOptions,
        dependencies: Sequence[Dependency],
    ) -> str:
        return self._render_template(
            self._type_template,
            type_name=options.type_name,
            dependencies=list(dependencies),
            indent=_INDENT,
        )

    def _render_methods(
        self,
        *,
        options: GeneratorOptions,
        dependencies: Sequence[Dependency],
    ) -> str:
        method_blocks: list[str] = []
        for dependency in dependencies:
            logger.debug(
                "Rendering container methods for dependency name=%r type_expr=%r",
                dependency.name,
                dependency.type_expr,
            )
            method_blocks.append(
                self._render_template(
                    self._methods_template,
                    receiver_name=options.receiver_name,
                    type_name=options.type_name,
                    dependency=dependency,
                    indent=_INDENT,
                ),
            )
        return _SECTION_SEPARATOR.join(method_blocks)

    def _log_render_summary(
        self,
        *,
        options: GeneratorOptions,
        dependencies: Sequence[Dependency],
    ) -> None:
        logger.info(
            "Container codegen: package=%s type_name=%s receiver_name=%s "
            "import_count=%d dependency_count=%d",
            options.package,
            options.type_name,
            options.receiver_name,
            len(options.imports),
            len(dependencies),
        )

    def _template(self, text: str) -> Template:
        try:
            return self._env.from_string(text)
        except TemplateError as error:
            msg = f"Failed to compile container template: {error}"
            raise DigenTemplateError(msg) from error

    def _render_template(self, template: Template, **context: Any) -> str:
        try:
            return template.render(**context)
        except TemplateError as error:
            msg = f"Failed to render container template: {error}"
            raise DigenTemplateError(msg) from error
