"""Naming helpers for generated record types."""

import re

import inflection

_SEPARATOR_PATTERN = re.compile(r'[-_](\w)')


def singularize(word: str) -> str:
    """Return the singular form of an English word."""
    return inflection.singularize(word)


def is_plural(word: str) -> bool:
    """Check whether a word looks like an English plural."""
    return singularize(word) != word


def nested_type_name(property_name: str) -> str:
    """Derive a record name from the key that owns a nested object.

    "user_profiles" -> "UserProfile", "billing-address" -> "BillingAddress".
    """
    name = property_name[:1].upper() + property_name[1:]
    name = _SEPARATOR_PATTERN.sub(lambda m: m.group(1).upper(), name)

    if is_plural(name):
        name = singularize(name)

    return name
