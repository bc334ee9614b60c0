"""
Operations layer: the dispatcher, its request types and envelopes.

This layer is adapter-agnostic. The HTTP API and the CLI both call
``DirectoryDispatcher`` and render its ``Result`` with
``query_reply``/``submit_reply``.
"""

from expo_directory.ops.dispatcher import DirectoryDispatcher, format_timestamp, parse_body
from expo_directory.ops.envelopes import Envelope, query_reply, submit_reply
from expo_directory.ops.requests import AppendExhibitorRequest, DirectoryQuery

__all__ = [
    "AppendExhibitorRequest",
    "DirectoryDispatcher",
    "DirectoryQuery",
    "Envelope",
    "format_timestamp",
    "parse_body",
    "query_reply",
    "submit_reply",
]
