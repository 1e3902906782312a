"""
LSP Capabilities Manager

Feature requests are routed through the CapabilityManager to capability
plugins, so a new source of completions can be added without touching the
server setup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lsprotocol.types import CompletionList, CompletionParams

from wordls.lsp.errors import DecodeError
from wordls.workspace.document_store import DocumentNotOpenError

if TYPE_CHECKING:
    from wordls.lsp.word_language_server import WordLanguageServer


class Capability(ABC):
    """A feature plugin reached through the CapabilityManager."""

    def __init__(self, server: WordLanguageServer) -> None:
        self.server = server

    def register(self) -> None:
        """Hook for capabilities that need their own pygls features."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    async def can_handle(self, params) -> bool:
        pass


class CompletionCapability(Capability):
    """
    A source of completion items.

    complete() may raise DocumentNotOpenError, which the manager logs, or
    DecodeError when the request payload is unusable past what the
    lsprotocol converter checks, which the manager answers with a parse
    error.
    """

    @abstractmethod
    async def complete(self, params: CompletionParams) -> CompletionList:
        pass


class CapabilityManager:
    """
    Routes completion requests to the registered capabilities.

    Usage:
        manager = CapabilityManager(server)
        manager.register_all()
        result = await manager.handle_completion(params)
    """

    def __init__(
        self,
        server: WordLanguageServer,
        capabilities: dict[str, Capability] | None = None,
    ):
        self.server = server

        if capabilities is None:
            from wordls.lsp.capabilities.word_completion import (
                WordCompletionCapability,
            )

            capabilities = {
                "word_completion": WordCompletionCapability(server),
            }

        self.capabilities = capabilities
        self._registered = False

    def register_all(self) -> None:
        """Register all capabilities with the server."""
        if self._registered:
            return

        for capability in self.capabilities.values():
            capability.register()

        self._registered = True

    def get_capability(self, name: str) -> Capability | None:
        """Get a specific capability by name"""
        return self.capabilities.get(name)

    def get_capabilities_by_type(self, capability_type: type) -> list[Capability]:
        """Get all capabilities of a specific type (e.g., all CompletionCapability)."""
        return [
            cap
            for cap in self.capabilities.values()
            if isinstance(cap, capability_type)
        ]

    async def handle_completion(self, params: CompletionParams) -> CompletionList | None:
        """
        Handle completion requests by delegating to capable handlers.

        Returns None, and logs the reason, when the document is not open.
        A DecodeError is answered with a JSON-RPC parse error.
        """
        all_items = []

        for capability in self.get_capabilities_by_type(CompletionCapability):
            if not await capability.can_handle(params):
                continue

            try:
                result = await capability.complete(params)  # pyright: ignore
            except DocumentNotOpenError as e:
                self.server.log(str(e))
                return None
            except DecodeError as e:
                self.server.log(str(e))
                raise e.to_rpc_error() from e

            all_items.extend(result.items)

        return CompletionList(is_incomplete=False, items=all_items)
