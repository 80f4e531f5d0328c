"""Application layer – mail delivery ports and adapters."""
