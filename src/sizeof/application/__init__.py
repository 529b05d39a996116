"""Application layer orchestrating catalog features for user interfaces."""
