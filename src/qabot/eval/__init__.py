"""Offline retrieval-accuracy harness for a Q/A corpus."""
