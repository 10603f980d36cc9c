"""
YAML Encoding for TriBool

TriBool dumps as its token string. PyYAML quotes 'yes' and 'no' because
YAML 1.1 would otherwise read them back as booleans; 'maybe' stays plain.

Loading is lenient in the same way as the JSON hook. Unquoted YAML 1.1
booleans (yes/no/on/off/true/false) arrive as bool and convert directly,
so hand-written config files decode as expected.
"""
from __future__ import annotations

import logging
from typing import Any, Union

import yaml

from .canon import decode_value, encode_value
from .tribool import TriBool

logger = logging.getLogger(__name__)


class TriBoolDumper(yaml.SafeDumper):
    """SafeDumper that knows how to represent TriBool."""


def _represent_tribool(dumper: yaml.SafeDumper, value: TriBool) -> yaml.ScalarNode:
    return dumper.represent_str(encode_value(value))


TriBoolDumper.add_representer(TriBool, _represent_tribool)


def dump_yaml(obj: Any) -> str:
    """Dump a structure that may embed TriBool values, keys in insertion order."""
    return yaml.dump(
        obj,
        Dumper=TriBoolDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def from_yaml(text: Union[str, bytes]) -> TriBool:
    """
    Decode a YAML document into a TriBool.

    Malformed YAML and scalars PyYAML cannot construct (impossible dates,
    bad explicit tags such as !!int abc) are MAYBE.
    """
    try:
        obj = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, TypeError, RecursionError) as e:
        logger.debug("Malformed TriBool YAML, using maybe: %s", e)
        return TriBool.MAYBE
    return decode_value(obj)


__all__ = ["TriBoolDumper", "dump_yaml", "from_yaml"]
