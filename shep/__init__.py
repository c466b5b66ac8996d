"""
shep - git worktree manager with local environment bootstrapping
"""

from .__version__ import __version__
from .core import Shep
from .cli.main import main

__all__ = ["Shep", "main", "__version__"]
