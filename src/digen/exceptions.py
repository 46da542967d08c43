class DigenError(Exception):
    """Represent a base class for all digen-specific failures.

    Catch this type when you want to handle any digen error path without
    matching each concrete exception class individually.
    """


class DigenTemplateError(DigenError):
    """Signal a defect in one of the bundled container templates.

    Raised by ``ContainerTemplateRenderer`` when Jinja2 fails to compile or
    render a fixed template. Caller-supplied names, type expressions and
    bodies are passed to templates as opaque values, so this error points at
    the templates themselves rather than at the generator configuration.

    The original ``jinja2.TemplateError`` is available as ``__cause__``.
    """


class DigenEmptyIdentifierError(DigenError, ValueError):
    """Signal that an empty identifier reached a casing helper.

    Raised by ``ucfirst``/``lcfirst`` and therefore by ``Generator.render``
    when a dependency was registered with an empty name.

    Typical fix is passing a non-empty, lowercase-led dependency name to
    ``Generator.add_dependency``.
    """
