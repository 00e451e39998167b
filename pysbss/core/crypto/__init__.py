"""
Cryptographic helpers.
"""
from .challenge_signer import ChallengeSigner, sign

__all__ = [
    'ChallengeSigner',
    'sign',
]
