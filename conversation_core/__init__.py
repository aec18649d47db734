"""conversation-core - multi-party conversations, messages, receipts and annotations."""

__version__ = "1.0.0"
