"""
Media type parsing and comparison.

Exact comparison looks at type and subtype only. Compatibility honours the
``type/*`` and ``*/*`` wildcards on either side.
"""

from dataclasses import dataclass, field

from fluentrest.errors import InvalidMediaTypeError


WILDCARD = "*"

APPLICATION_XML = "application/xml"
APPLICATION_JSON = "application/json"
TEXT_XML = "text/xml"
TEXT_PLAIN = "text/plain"


@dataclass(frozen=True)
class MediaType:
    """Parsed ``type/subtype; param=value`` media type."""
    type: str = WILDCARD
    subtype: str = WILDCARD
    parameters: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def parse(cls, value: "str | MediaType") -> "MediaType":
        """Parse a media type string. A bare ``*`` means ``*/*``."""
        if isinstance(value, MediaType):
            return value

        main, _, rest = value.partition(";")
        main = main.strip().lower()
        if main == WILDCARD:
            main = "*/*"
        if "/" not in main:
            raise InvalidMediaTypeError(value)

        type_, subtype = (p.strip() for p in main.split("/", 1))
        if not type_ or not subtype:
            raise InvalidMediaTypeError(value)

        params = {}
        for item in rest.split(";"):
            if "=" in item:
                name, param_value = item.split("=", 1)
                params[name.strip().lower()] = param_value.strip().strip('"')

        return cls(type=type_, subtype=subtype, parameters=params)

    @property
    def is_wildcard_type(self) -> bool:
        return self.type == WILDCARD

    @property
    def is_wildcard_subtype(self) -> bool:
        return self.subtype == WILDCARD

    @property
    def charset(self) -> str | None:
        return self.parameters.get("charset")

    def is_compatible(self, other: "str | MediaType") -> bool:
        """Check compatibility, treating wildcards on either side as matches."""
        other = MediaType.parse(other)

        if self.is_wildcard_type or other.is_wildcard_type:
            return True
        if self.type != other.type:
            return False
        if self.is_wildcard_subtype or other.is_wildcard_subtype:
            return True
        return self.subtype == other.subtype

    def __str__(self) -> str:
        value = f"{self.type}/{self.subtype}"
        for name, param_value in self.parameters.items():
            value += f";{name}={param_value}"
        return value
