"""Settings an integrator can use to override what the plugin infers by itself.

Every option is optional except `account_code`, and even that one is only
required when the options get activated (see `youbora_options.activation`).
An option is "set" when it was passed to the constructor or assigned
afterwards. An explicit `False`, `0` or `""` overrides like any other value,
while `None` always means unset: passing or assigning it clears the option
back to its default. `merge()` relies on that distinction to layer one
options object over another.
"""

import copy
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from youbora_options import constants

logger = logging.getLogger(__name__)


class ConfigurationOptions(BaseModel):
    """Youbora plugin configuration options.

    Attributes use snake_case, and the plugin's camelCase option names
    (`accountCode`, `parseCdnNodeList`, ...) are accepted as aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        coerce_numbers_to_str=True,
        extra="forbid",
    )

    # Transport; `enabled=False` stops the plugin from sending any request
    enabled: bool | None = constants.DEFAULT_ENABLED
    http_secure: bool | None = constants.DEFAULT_HTTP_SECURE
    host: str | None = None

    # Identity
    account_code: str | None = None
    username: str | None = None

    # Resource parsing hints
    parse_hls: bool | None = constants.DEFAULT_PARSE_HLS
    parse_cdn_name_header: str | None = None
    parse_cdn_node: bool | None = constants.DEFAULT_PARSE_CDN_NODE
    parse_cdn_node_list: list[str] | None = Field(
        default_factory=lambda: list(constants.DEFAULT_CDN_NODE_LIST)
    )

    # Network
    network_ip: str | None = Field(default=None, alias="networkIP")
    network_isp: str | None = None
    network_connection_type: str | None = None

    # Device code, takes precedence over the user agent
    device_code: str | None = None

    # Content
    content_resource: str | None = None
    # True: live, False: VOD, None: unknown
    content_is_live: bool | None = None
    content_title: str | None = None
    content_title2: str | None = None
    content_duration: float | None = None  # seconds
    content_transaction_code: str | None = None
    content_bitrate: int | None = None  # bits per second
    content_throughput: int | None = None  # bits per second
    content_rendition: str | None = None
    content_cdn: str | None = None
    content_fps: float | None = None

    content_metadata: dict[str, Any] | None = None
    ad_metadata: dict[str, Any] | None = None

    extraparam1: str | None = None
    extraparam2: str | None = None
    extraparam3: str | None = None
    extraparam4: str | None = None
    extraparam5: str | None = None
    extraparam6: str | None = None
    extraparam7: str | None = None
    extraparam8: str | None = None
    extraparam9: str | None = None
    extraparam10: str | None = None

    def __init__(self, **data: Any) -> None:
        super().__init__(
            **{key: value for key, value in data.items() if value is not None}
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if value is None and name in type(self).model_fields:
            self.unset(name)
        else:
            super().__setattr__(name, value)

    @classmethod
    def field_name(cls, name: str) -> str:
        """Resolve an attribute name or a camelCase alias to the attribute name.

        Raises:
            ValueError: If `name` is not a known option
        """
        fields = cls.model_fields
        if name in fields:
            return name
        for field_name, field in fields.items():
            if field.alias == name:
                return field_name
        raise ValueError(f"Unknown option: {name}")

    def is_set(self, name: str) -> bool:
        """Whether the option was explicitly set, even to a falsy value."""
        return self.field_name(name) in self.model_fields_set

    def explicit_fields(self) -> set[str]:
        """Return the attribute names of all explicitly set options."""
        return set(self.model_fields_set)

    def unset(self, *names: str) -> None:
        """Clear options back to their default value and mark them as unset."""
        fields = type(self).model_fields
        for name in names:
            field_name = self.field_name(name)
            default = fields[field_name].get_default(call_default_factory=True)
            super().__setattr__(field_name, default)
            self.model_fields_set.discard(field_name)

    def merged_with(self, override: "ConfigurationOptions") -> "ConfigurationOptions":
        """Shortcut for `merge(self, override)`."""
        return merge(self, override)

    def to_dict(self, by_alias: bool = True, only_set: bool = False) -> dict[str, Any]:
        """Dump the options field by field.

        Args:
            by_alias: Key the result by the camelCase option names
            only_set: Leave out options that were never explicitly set
        """
        return self.model_dump(by_alias=by_alias, exclude_unset=only_set)


def merge(
    base: ConfigurationOptions, override: ConfigurationOptions
) -> ConfigurationOptions:
    """Layer `override` over `base` and return the result as a new instance.

    An option takes the override's value only if it is explicitly set there
    to something other than `None`, otherwise the base's value (and whether
    it was set) is kept. The result counts as set every option set in either
    input, so merges can be chained.
    Neither input is modified and values are deep copied, so the result never
    shares a list or dict with them.

    Args:
        base: Options to start from
        override: Options whose explicitly set values win

    Returns:
        ConfigurationOptions: The merged options
    """
    update = {
        name: copy.deepcopy(getattr(override, name))
        for name in override.model_fields_set
        if getattr(override, name) is not None
    }
    merged = base.model_copy(update=update, deep=True)
    logger.debug("Options overridden by merge: %s", sorted(update) or "none")
    return merged
