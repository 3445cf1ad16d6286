"""Repository collaborators used by the ignore rules"""

from .addition import Addition
from .repo import RepoRoot

__all__ = ['Addition', 'RepoRoot']
