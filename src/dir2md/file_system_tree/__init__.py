"""Filtered directory trees for documentation.

This package builds the in-memory tree of a scan root, classifies file
contents, and renders the tree as an ASCII diagram.
"""
