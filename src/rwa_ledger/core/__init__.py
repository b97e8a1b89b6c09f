"""
Core domain models, errors, configuration and contracts.

This module contains the foundational building blocks that are independent
of the host ledger (call envelopes, block production, native currency).
"""
