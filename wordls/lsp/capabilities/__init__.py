"""LSP capabilities provided by wordls."""
from .capabilities import Capability, CapabilityManager, CompletionCapability
from .word_completion import WordCompletionCapability

__all__ = [
    'Capability',
    'CapabilityManager',
    'CompletionCapability',
    'WordCompletionCapability',
]
