#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/cli/actions.py
"""Argparse actions that read their defaults from environment variables.

An option with destination ``strict_mode`` takes its default from
``TINYMARK_STRICT_MODE`` when that variable is set. Values given on the
command line always win.
"""

import argparse
import logging
import os

from tinymark.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def env_key_for(dest: str) -> str:
    """Return the environment variable consulted for an option destination."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Convert an environment string to a boolean.

    Raises
    ------
    ValueError
        If the value is not a recognised boolean spelling

    """
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"expected one of {TRUE_VALUES + FALSE_VALUES}, got {value!r}")


class EnvironmentAwareAction(argparse._StoreAction):
    """Store action whose default may come from the environment."""

    def __init__(self, option_strings, dest, **kwargs):
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            converter = kwargs.get("type") or str
            try:
                kwargs["default"] = converter(env_value)
            except (ValueError, TypeError, argparse.ArgumentTypeError) as e:
                logger.warning(f"Invalid environment variable {env_key_for(dest)}={env_value}: {e}")
        super().__init__(option_strings, dest, **kwargs)


class EnvironmentAwareConstAction(argparse._StoreConstAction):
    """Store-const action for boolean switches with an environment default.

    Several switches may share one destination (``--strict``/``--lenient``);
    each reads the same environment variable, parsed as a boolean.
    """

    def __init__(self, option_strings, dest, const, **kwargs):
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            try:
                kwargs["default"] = parse_bool(env_value)
            except ValueError as e:
                logger.warning(f"Invalid environment variable {env_key_for(dest)}={env_value}: {e}")
        super().__init__(option_strings, dest, const=const, **kwargs)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Store-true action whose default may come from the environment."""

    def __init__(self, option_strings, dest, **kwargs):
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            try:
                kwargs["default"] = parse_bool(env_value)
            except ValueError as e:
                logger.warning(f"Invalid environment variable {env_key_for(dest)}={env_value}: {e}")
        super().__init__(option_strings, dest, **kwargs)
