"""Marker - check the links in a tree of markdown documents."""
