from __future__ import annotations

from lsprotocol.types import (
    INITIALIZED,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_HOVER,
    WORKSPACE_DID_CHANGE_CONFIGURATION,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    DidChangeConfigurationParams,
    HoverParams,
    InitializedParams,
    TextDocumentSyncKind,
)

from wordls import __version__
from wordls.config import ServerConfig
from wordls.lsp.capabilities.capabilities import CapabilityManager
from wordls.lsp.text_sync_manager import TextSyncManager
from wordls.lsp.word_language_server import WordLanguageServer


def create_server(config: ServerConfig | None = None) -> WordLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - The initialize/shutdown/exit lifecycle
    - MethodNotFound replies for methods without a registered feature

    Everything else is registered here by method name.
    """
    server = WordLanguageServer(
        "wordls",
        __version__,
        config=config,
        text_document_sync_kind=TextDocumentSyncKind.Full,
    )

    server.text_sync_manager = TextSyncManager(server)
    server.text_sync_manager.register_handlers()

    server.capability_manager = CapabilityManager(server)
    server.capability_manager.register_all()

    @server.feature(INITIALIZED)
    def initialized(ls: WordLanguageServer, params: InitializedParams):
        ls.log("Language server initialized successfully")

    @server.feature(WORKSPACE_DID_CHANGE_CONFIGURATION)
    def did_change_configuration(ls: WordLanguageServer, params: DidChangeConfigurationParams):
        ls.log("Ack")

    @server.feature(
        TEXT_DOCUMENT_COMPLETION,
        CompletionOptions(trigger_characters=server.config.trigger_characters),
    )
    async def completion(ls: WordLanguageServer, params: CompletionParams) -> CompletionList | None:
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return None

    @server.feature(TEXT_DOCUMENT_HOVER)
    def hover(ls: WordLanguageServer, params: HoverParams):
        return None

    return server
