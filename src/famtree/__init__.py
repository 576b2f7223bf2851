"""
famtree: an interactive family tree rendered generation by generation.
"""

__version__ = "0.1.0"
