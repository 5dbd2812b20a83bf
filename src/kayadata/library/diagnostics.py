"""
Collection of non-fatal diagnostics raised by Kaya identity queries.

Queries that match no country or region do not fail. They report a message
to a :class:`DiagnosticSink` and return an empty table. A sink either
collects messages for the caller to inspect, or additionally issues them as
:class:`~kayadata.library.exceptions.NoDataWarning` warnings, which is what
happens when the caller does not supply a sink.
"""

from __future__ import annotations

import inspect
import logging
import os
import warnings
from collections.abc import Sequence

from attrs import define, field

from kayadata.library.error_messages import format_error
from kayadata.library.exceptions import NoDataWarning

logger = logging.getLogger(__name__)

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def find_stack_level() -> int:
    """
    Find the first place in the stack that is not inside kayadata.

    Used as the ``stacklevel`` of warnings so that they point at the line
    that called into the library, however deep the call that reports them.
    """
    frame = inspect.currentframe()
    try:
        n = 0
        while frame:
            if inspect.getfile(frame).startswith(_PACKAGE_DIR):
                frame = frame.f_back
                n += 1
            else:
                break
    finally:
        del frame
    return n


@define
class DiagnosticSink:
    """
    Receiver for non-fatal diagnostics.

    Attributes
    ----------
    messages
        Messages reported so far, in order.
    emit_warnings
        If True, each reported message is also issued with
        :func:`warnings.warn` as a :class:`NoDataWarning`.

    Examples
    --------
    >>> sink = DiagnosticSink()
    >>> get_historical("Atlantis", diagnostics=sink)  # doctest: +SKIP
    >>> sink.messages
    ['There is no data for country or region Atlantis']
    """

    messages: list[str] = field(factory=list)
    emit_warnings: bool = field(default=False, kw_only=True)

    def report(self, message: str) -> None:
        """Record a message, and warn if this sink emits warnings."""
        self.messages.append(message)
        logger.debug("Diagnostic: %s", message)
        if self.emit_warnings:
            warnings.warn(message, NoDataWarning, stacklevel=find_stack_level())

    def clear(self) -> None:
        """Forget all collected messages."""
        self.messages.clear()

    def __len__(self) -> int:
        return len(self.messages)


def resolve_sink(diagnostics: DiagnosticSink | None) -> DiagnosticSink:
    """Return ``diagnostics``, or a fresh warning-emitting sink if it is None."""
    if diagnostics is None:
        return DiagnosticSink(emit_warnings=True)
    return diagnostics


def report_no_data(
    sink: DiagnosticSink,
    region_names: Sequence[str],
    region_codes: Sequence[str] | None = None,
) -> None:
    """
    Report that a query matched no rows.

    The message names the requested regions. When the caller asked by code
    and none of the codes resolved to a region, the codes are named instead.

    Parameters
    ----------
    sink
        Where to report the message
    region_names
        Region names the query filtered on
    region_codes
        Region codes the caller supplied, if any
    """
    if region_codes is not None and len(region_names) == 0:
        requested = list(region_codes)
    else:
        requested = list(region_names)
    sink.report(format_error("no_region_data", regions=", ".join(requested)))
