"""wordls - frequency-ranked word completion over LSP."""

__version__ = "0.1.0"
