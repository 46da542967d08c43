from digen.casing import lcfirst, ucfirst
from digen.exceptions import DigenEmptyIdentifierError, DigenError, DigenTemplateError
from digen.generator import Dependency, Generator, GeneratorOptions
from digen.settings import GeneratorSettings

__all__ = [
    "Dependency",
    "DigenEmptyIdentifierError",
    "DigenError",
    "DigenTemplateError",
    "Generator",
    "GeneratorOptions",
    "GeneratorSettings",
    "lcfirst",
    "ucfirst",
]
