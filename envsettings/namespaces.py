"""
Namespaced settings derived from dotted keys.

A key such as ``openai.model`` belongs to namespace ``openai`` with sub-key
``model``. Only the first dot separates the namespace; ``a.b.c`` yields
namespace ``a`` and sub-key ``b.c``, and ``ns.`` yields sub-key ``""``.
"""

import json
from typing import Dict, Mapping, Optional

NAMESPACE_SEPARATOR = "."
LEGACY_KEY_PREFIX = "__namespaced_"

NamespacedSettings = Dict[str, Dict[str, str]]


def split_namespaced_key(key: str) -> Optional[tuple]:
    """Split a key into (namespace, sub_key), or None if it is not namespaced."""
    namespace, sep, sub_key = key.partition(NAMESPACE_SEPARATOR)
    if not sep or not namespace:
        return None
    return namespace, sub_key


def parse_namespaced_settings(settings: Mapping[str, Optional[str]]) -> NamespacedSettings:
    """
    Group dotted keys by namespace.

    Keys without a dot, keys starting with a dot, and keys whose value is
    empty or None are left out.

    Args:
        settings: Flat key/value mapping

    Returns:
        Mapping of namespace to its sub-key/value pairs
    """
    namespaced: NamespacedSettings = {}

    for key, value in settings.items():
        if not value:
            continue

        parts = split_namespaced_key(key)
        if parts is None:
            continue

        namespace, sub_key = parts
        namespaced.setdefault(namespace, {})[sub_key] = value

    return namespaced


def legacy_namespace_entries(namespaces: NamespacedSettings) -> Dict[str, str]:
    """Serialize each namespace as JSON under ``__namespaced_<namespace>``.

    Only for consumers that can read nothing but a flat string mapping.
    """
    return {
        f"{LEGACY_KEY_PREFIX}{namespace}": json.dumps(group)
        for namespace, group in namespaces.items()
    }
