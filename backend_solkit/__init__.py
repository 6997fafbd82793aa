"""
Backend Solkit: stateless Solana toolkit service.

Generates ed25519 keypairs, signs and verifies messages, and builds unsigned
System / SPL Token instructions (initialize mint, mint to, SOL transfer,
token transfer). Never submits anything to a cluster.
"""

__version__ = "0.1.0"
