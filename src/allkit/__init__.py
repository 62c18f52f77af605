"""allkit: typed attribute containers and small runtime utilities."""

from importlib.metadata import version as _version

__version__ = _version("allkit")

from allkit.attribute_key import AttributeKey
from allkit.attributes import Attributes
from allkit.exceptions import (
    AllkitError,
    AttributeNotFoundError,
    EnvironmentVariableError,
    InvalidArgumentsError,
)
from allkit.serialization import AttributesJSONEncoder, dumps
# env, reflection, awaitable and todo are NOT auto-imported; import the submodule

__all__ = [
    "AttributeKey",
    "Attributes",
    "AttributesJSONEncoder",
    "dumps",
    "AllkitError",
    "AttributeNotFoundError",
    "EnvironmentVariableError",
    "InvalidArgumentsError",
]
