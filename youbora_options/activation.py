"""Checks the plugin runs on options before it starts sending requests."""

import logging

from youbora_options.options import ConfigurationOptions

logger = logging.getLogger(__name__)


class ActivationError(Exception):
    """Exception raised when options can't be used to activate the plugin."""


def validate_for_activation(options: ConfigurationOptions) -> ConfigurationOptions:
    """Make sure the options are complete enough to activate the plugin.

    The account code is the only required option. It isn't enforced when the
    options are built, so integrators can fill it in at any point before
    activation.

    Args:
        options: Fully merged options

    Returns:
        ConfigurationOptions: The same options, unchanged

    Raises:
        ActivationError: If the account code is missing
    """
    if not options.account_code:
        raise ActivationError("accountCode is required to activate the plugin")

    logger.info("Activating plugin for account %s", options.account_code)
    if options.enabled is False:
        logger.info("Plugin is disabled, no requests will be sent")

    return options
