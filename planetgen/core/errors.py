# planetgen/core/errors.py


class PlanetgenError(Exception):
    """Base class for planetgen errors."""


class PreconditionError(PlanetgenError):
    """A stage was asked to generate a body its inputs cannot support."""


__all__ = ["PlanetgenError", "PreconditionError"]
