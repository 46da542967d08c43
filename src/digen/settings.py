from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PACKAGE = "main"
DEFAULT_RECEIVER_NAME = "c"
DEFAULT_TYPE_NAME = "Container"


class GeneratorSettings(BaseSettings):
    """Environment-backed defaults for ``Generator.from_settings``.

    Every field maps to a ``DIGEN_``-prefixed environment variable, e.g.
    ``DIGEN_TYPE_NAME=DIContainer``. ``DIGEN_IMPORTS`` is parsed as a JSON
    list such as ``'["fmt", "os"]'``.
    """

    model_config = SettingsConfigDict(env_prefix="DIGEN_")

    package: str = DEFAULT_PACKAGE
    receiver_name: str = DEFAULT_RECEIVER_NAME
    type_name: str = DEFAULT_TYPE_NAME
    imports: list[str] = []
