"""Resolve ${VAR} build variables in configured names."""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

TOKEN_START = "${"
TOKEN_END = "}"


def build_environment(
    env_vars: Mapping[str, str],
    build_vars: Mapping[str, str],
) -> Mapping[str, str]:
    """
    Merge the two variable layers into a read-only environment.

    Build parameters override build environment variables of the same name.
    """
    merged = dict(env_vars)
    merged.update(build_vars)
    return MappingProxyType(merged)


def resolve_variables(template: str, environment: Mapping[str, str]) -> Optional[str]:
    """
    Replace every ${NAME} token in ``template`` with its environment value.

    Tokens are replaced one at a time, left to right. Substituted values are
    not scanned for further tokens. A single unknown name invalidates the
    whole template and None is returned.
    """
    result = template
    pos = 0
    while True:
        start = result.find(TOKEN_START, pos)
        if start == -1:
            return result
        end = result.find(TOKEN_END, start + len(TOKEN_START))
        if end == -1:
            return result

        name = result[start + len(TOKEN_START):end]
        if name not in environment:
            logger.warning("Could not resolve variable ${%s} in '%s'", name, template)
            return None

        value = environment[name]
        result = result[:start] + value + result[end + len(TOKEN_END):]
        pos = start + len(value)
