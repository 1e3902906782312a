from lsprotocol.types import LogMessageParams, MessageType
from pygls.lsp.server import LanguageServer

from wordls.config import ServerConfig
from wordls.lsp.capabilities.capabilities import CapabilityManager
from wordls.lsp.text_sync_manager import TextSyncManager
from wordls.workspace.document_store import DocumentStore
from wordls.workspace.keywords import KeywordTable


class WordLanguageServer(LanguageServer):
    """
    Language Server holding the word completion state.

    Attributes:
        config: Settings loaded at startup
        keyword_table: Keywords offered in every completion list
        document_store: Text and word counts of every open document
        text_sync_manager: Routes document sync notifications to hooks
        capability_manager: Routes feature requests to capabilities
    """

    def __init__(self, name: str, version: str, config: ServerConfig | None = None, **kwargs):
        super().__init__(name, version, **kwargs)

        self.config = config or ServerConfig()
        self.keyword_table = KeywordTable.with_extra(
            self.config.extra_keywords, self.config.keyword_weight
        )
        self.document_store = DocumentStore(keywords=self.keyword_table)
        self.text_sync_manager: TextSyncManager | None = None
        self.capability_manager: CapabilityManager | None = None

    def log(self, message: str, type: MessageType = MessageType.Log) -> None:
        """Send a window/logMessage notification to the client."""
        self.window_log_message(LogMessageParams(type=type, message=message))
