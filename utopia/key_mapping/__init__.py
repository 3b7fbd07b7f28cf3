"""Qualified key utilities."""

from .qualifier import DEFAULT_QUALIFIER, KeyQualifier


qualify = DEFAULT_QUALIFIER.qualify
local_name = DEFAULT_QUALIFIER.local_name
namespace = DEFAULT_QUALIFIER.namespace

__all__ = ["DEFAULT_QUALIFIER", "KeyQualifier", "local_name", "namespace", "qualify"]
