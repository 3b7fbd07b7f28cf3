"""Namespace-qualified key utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utopia.errors import InvalidArgumentError


if TYPE_CHECKING:
    from collections.abc import Callable


class KeyQualifier:
    """Split and build keys of the form ``namespace<sep>name``.

    The key is split on the first separator, so ``"a/b/c"`` has namespace
    ``"a"`` and name ``"b/c"``. A key equal to the separator itself is an
    unqualified name. Empty segments are allowed: ``"ns/"`` has an empty
    local name and ``"/name"`` has no namespace.
    """

    def __init__(self, sep: str = "/") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def split(self, key: Any) -> tuple[str | None, str]:
        """Return ``(namespace, name)``; namespace is None for plain keys."""
        if not isinstance(key, str):
            msg = f"qualified keys must be strings, got {type(key).__name__}"
            raise InvalidArgumentError(msg, argument="key")
        if key == self.sep:
            return None, key

        namespace, found, name = key.partition(self.sep)
        if not found:
            return None, key
        return namespace or None, name

    def namespace(self, key: Any) -> str | None:
        return self.split(key)[0]

    def local_name(self, key: Any) -> str:
        return self.split(key)[1]

    def _check_namespace(self, ns: str | None) -> None:
        if ns is None:
            return
        if not isinstance(ns, str):
            msg = f"namespace must be a string or None, got {type(ns).__name__}"
            raise InvalidArgumentError(msg, argument="ns")
        if not ns:
            msg = "namespace must not be empty"
            raise ValueError(msg)
        if self.sep in ns:
            msg = "namespace must not contain separator"
            raise ValueError(msg)

    def qualify(self, ns: str | None, name: str) -> str:
        """Build a key from a namespace and a local name."""
        self._check_namespace(ns)
        if ns is None:
            return name
        return f"{ns}{self.sep}{name}"

    def requalifier(self, ns: str | None) -> Callable[[Any], str]:
        """Return a key transform that moves any key into namespace ``ns``."""
        self._check_namespace(ns)

        def requalify(key: Any) -> str:
            return self.qualify(ns, self.local_name(key))

        return requalify


DEFAULT_QUALIFIER = KeyQualifier()
