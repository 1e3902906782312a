"""
Text Synchronization Manager

Manages LSP text sync events and provides hook extension points
for components that mirror document content.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    MessageType,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_SAVE,
)

from wordls.lsp.errors import DecodeError

if TYPE_CHECKING:
    from wordls.lsp.word_language_server import WordLanguageServer

logger = logging.getLogger(__name__)

OnOpenHook = Callable[[DidOpenTextDocumentParams], Awaitable[None]]
OnChangeHook = Callable[[DidChangeTextDocumentParams], Awaitable[None]]
OnSaveHook = Callable[[DidSaveTextDocumentParams], Awaitable[None]]
OnCloseHook = Callable[[DidCloseTextDocumentParams], Awaitable[None]]


class TextSyncManager:
    """
    Manages text document synchronization and hook broadcasting.

    The server runs with full text sync: every change notification carries
    the whole document. The built-in hooks keep the DocumentStore in step
    with the editor; further hooks can be added for other consumers.

    Design Principles:
    - Hooks run in registration order
    - Errors are isolated (one hook failure doesn't affect others)
    - No return values (notifications, not requests)

    Usage:
        text_sync = TextSyncManager(server)
        text_sync.register_handlers()
        server.text_sync_manager = text_sync
    """

    def __init__(self, server: WordLanguageServer) -> None:
        self.server = server

        self._on_open_hooks: list[OnOpenHook] = [self._store_opened]
        self._on_change_hooks: list[OnChangeHook] = [self._store_changed]
        self._on_save_hooks: list[OnSaveHook] = []
        self._on_close_hooks: list[OnCloseHook] = []

        if server.config.evict_on_close:
            self._on_close_hooks.append(self._evict_closed)

    def add_on_open_hook(self, hook: OnOpenHook) -> None:
        """Register a hook for document open events."""
        self._on_open_hooks.append(hook)

    def add_on_change_hook(self, hook: OnChangeHook) -> None:
        """
        Register a hook for document change events.

        Change hooks run on every keystroke. Keep them fast.
        """
        self._on_change_hooks.append(hook)

    def add_on_save_hook(self, hook: OnSaveHook) -> None:
        """Register a hook for document save events."""
        self._on_save_hooks.append(hook)

    def add_on_close_hook(self, hook: OnCloseHook) -> None:
        """Register a hook for document close events."""
        self._on_close_hooks.append(hook)

    # ===== Document store hooks =====

    async def _store_opened(self, params: DidOpenTextDocumentParams) -> None:
        document = params.text_document
        stored = self.server.document_store.put(document.uri, document.text)
        logger.debug("Opened %s: %d distinct words", document.uri, len(stored.frequencies))

    async def _store_changed(self, params: DidChangeTextDocumentParams) -> None:
        if not params.content_changes:
            raise DecodeError(TEXT_DOCUMENT_DID_CHANGE, "contentChanges is empty")

        # Full sync: the first change holds the whole text
        text = params.content_changes[0].text
        self.server.document_store.put(params.text_document.uri, text)

    async def _evict_closed(self, params: DidCloseTextDocumentParams) -> None:
        if self.server.document_store.remove(params.text_document.uri):
            logger.debug("Evicted %s", params.text_document.uri)

    # ===== Broadcasting =====

    async def _broadcast(self, event: str, hooks: list, params) -> None:
        """
        Call every hook for an event in registration order.

        A DecodeError means the notification is unusable and is logged
        as such; any other error is reported with the hook that raised it.
        """
        for hook in hooks:
            try:
                await hook(params)
            except DecodeError as e:
                logger.warning("Dropped %s notification: %s", event, e)
                self.server.log(str(e))
            except Exception as e:
                logger.exception("Error in %s hook %s", event, hook.__name__)
                self.server.log(
                    f"Error in {event} hook {hook.__name__}: {type(e).__name__}: {e}",
                    MessageType.Error,
                )

    async def _broadcast_on_open(self, params: DidOpenTextDocumentParams) -> None:
        await self._broadcast("on_open", self._on_open_hooks, params)

    async def _broadcast_on_change(self, params: DidChangeTextDocumentParams) -> None:
        await self._broadcast("on_change", self._on_change_hooks, params)

    async def _broadcast_on_save(self, params: DidSaveTextDocumentParams) -> None:
        await self._broadcast("on_save", self._on_save_hooks, params)

    async def _broadcast_on_close(self, params: DidCloseTextDocumentParams) -> None:
        await self._broadcast("on_close", self._on_close_hooks, params)

    def register_handlers(self) -> None:
        """
        Register LSP text synchronization handlers with the server.

        Registers handlers for:
        - textDocument/didOpen
        - textDocument/didChange
        - textDocument/didSave
        - textDocument/didClose
        """

        @self.server.feature(TEXT_DOCUMENT_DID_OPEN)
        async def did_open(ls: WordLanguageServer, params: DidOpenTextDocumentParams) -> None:
            await self._broadcast_on_open(params)

        @self.server.feature(TEXT_DOCUMENT_DID_CHANGE)
        async def did_change(ls: WordLanguageServer, params: DidChangeTextDocumentParams) -> None:
            await self._broadcast_on_change(params)

        @self.server.feature(TEXT_DOCUMENT_DID_SAVE)
        async def did_save(ls: WordLanguageServer, params: DidSaveTextDocumentParams) -> None:
            await self._broadcast_on_save(params)

        @self.server.feature(TEXT_DOCUMENT_DID_CLOSE)
        async def did_close(ls: WordLanguageServer, params: DidCloseTextDocumentParams) -> None:
            await self._broadcast_on_close(params)
