"""Directive handlers and the registry used to dispatch them.

Each recognized directive name maps to a handler that applies the value to
a ManifestRecord. Handlers never raise; problems with a value are appended
to ``record.errors``.
"""

import logging
from typing import Callable

from ..core.errors import InvalidValue, TitleLength, UnmappedDirective
from ..core.limits import MAX_TITLE_CHARS
from ..core.types import ManifestRecord
from .dependencies import parse_dependencies
from .lines import DirectiveMatch
from .values import parse_bool, parse_unsigned

logger = logging.getLogger(__name__)

DirectiveHandler = Callable[[ManifestRecord, str, bool], None]


class DirectiveRegistry:
    """Central registry of directive handlers.

    Handlers are keyed by the exact, case-sensitive directive name. The
    built-in handlers register themselves when this module is imported.

    The registry is process-wide: a name registered here is recognized by
    every parse that starts afterwards, in any thread. Registration is
    add-only, so a handler can never be swapped out or removed while a
    parse is running.
    """

    _handlers: dict[str, DirectiveHandler] = {}

    @classmethod
    def register(cls, name: str, handler: DirectiveHandler) -> None:
        """Register a handler for a directive name.

        Args:
            name: Directive name as written in the manifest (e.g. 'Title')
            handler: Callable taking (record, value, full_validate)

        Raises:
            ValueError: If the name already has a handler

        Example:
            >>> def apply_credits(record, value, full_validate):
            ...     ...
            >>> DirectiveRegistry.register('Credits', apply_credits)
        """
        if name in cls._handlers:
            raise ValueError(f"Directive '{name}' already has a registered handler")
        cls._handlers[name] = handler

    @classmethod
    def get(cls, name: str) -> DirectiveHandler | None:
        return cls._handlers.get(name)

    @classmethod
    def names(cls) -> list[str]:
        """List all registered directive names in registration order."""
        return list(cls._handlers.keys())


def dispatch_directive(record: ManifestRecord, match: DirectiveMatch, full_validate: bool) -> None:
    """Apply a matched directive to the record.

    Unrecognized names are legal (authors add e.g. ``Credits``) and are
    recorded as an UnmappedDirective warning.
    """
    handler = DirectiveRegistry.get(match.name)
    if handler is None:
        logger.debug("Unmapped directive %r", match.name)
        record.warnings.append(UnmappedDirective(match.name, match.value))
        return

    logger.debug("Applying directive %s: %r", match.name, match.value)
    handler(record, match.value, full_validate)


def apply_title(record: ManifestRecord, value: str, full_validate: bool) -> None:
    if full_validate:
        char_len = len(value)
        if char_len > MAX_TITLE_CHARS:
            record.errors.append(TitleLength(char_len))
    record.title = value


def apply_author(record: ManifestRecord, value: str, full_validate: bool) -> None:
    record.author = value


def apply_api_version(record: ManifestRecord, value: str, full_validate: bool) -> None:
    """Set api_version, and api_version_2 when two versions are listed.

    ``100026 100027`` declares support for both API versions. If either
    half is not an integer neither field changes.
    """
    if " " in value:
        first, second = value.split(" ", 1)
        api_version = parse_unsigned(first)
        api_version_2 = parse_unsigned(second)
        if api_version is None or api_version_2 is None:
            record.errors.append(InvalidValue("APIVersion", value))
            return
        record.api_version = api_version
        record.api_version_2 = api_version_2
        return

    api_version = parse_unsigned(value)
    if api_version is None:
        record.errors.append(InvalidValue("APIVersion", value))
        return
    record.api_version = api_version


def apply_addon_version(record: ManifestRecord, value: str, full_validate: bool) -> None:
    addon_version = parse_unsigned(value)
    if addon_version is None:
        record.errors.append(InvalidValue("AddOnVersion", value))
        return
    record.addon_version = addon_version


def apply_version(record: ManifestRecord, value: str, full_validate: bool) -> None:
    # Free-form release label (e.g. 2.0.2), never parsed
    record.version = value


def apply_depends_on(record: ManifestRecord, value: str, full_validate: bool) -> None:
    parsed = parse_dependencies(value, "DependsOn")
    record.depends_on.extend(parsed.entries)
    record.errors.extend(parsed.issues)


def apply_optional_depends_on(record: ManifestRecord, value: str, full_validate: bool) -> None:
    parsed = parse_dependencies(value, "OptionalDependsOn")
    record.optional_depends_on.extend(parsed.entries)
    record.errors.extend(parsed.issues)


def apply_is_library(record: ManifestRecord, value: str, full_validate: bool) -> None:
    is_library = parse_bool(value)
    if is_library is None:
        record.errors.append(InvalidValue("IsLibrary", value))
        return
    record.is_library = is_library


# Auto-register at module import
DirectiveRegistry.register("Title", apply_title)
DirectiveRegistry.register("Author", apply_author)
DirectiveRegistry.register("APIVersion", apply_api_version)
DirectiveRegistry.register("AddOnVersion", apply_addon_version)
DirectiveRegistry.register("Version", apply_version)
DirectiveRegistry.register("DependsOn", apply_depends_on)
DirectiveRegistry.register("OptionalDependsOn", apply_optional_depends_on)
DirectiveRegistry.register("IsLibrary", apply_is_library)

BUILTIN_DIRECTIVES = tuple(DirectiveRegistry.names())
