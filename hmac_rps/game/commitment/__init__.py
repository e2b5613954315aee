"""
承诺-揭示模块
Commitment Module
"""
from .random_source import SecureRandomSource
from .commitment_provider import Commitment, CommitmentProvider

__all__ = [
    'SecureRandomSource',
    'Commitment',
    'CommitmentProvider'
]
