"""Errors raised while handling protocol messages."""

from __future__ import annotations

from pygls.exceptions import JsonRpcParseError


class DecodeError(ValueError):
    """A message payload does not have the shape a handler needs."""

    def __init__(self, method: str, reason: str) -> None:
        super().__init__(f"invalid {method} params: {reason}")
        self.method = method
        self.reason = reason

    def to_rpc_error(self) -> JsonRpcParseError:
        """The error a request handler replies with."""
        return JsonRpcParseError(message=str(self))
