"""Core building blocks shared across famtree."""
