"""
Reward models module.
"""
from .reward import Reward

__all__ = [
    'Reward',
]
