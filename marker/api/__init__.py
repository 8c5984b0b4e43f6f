"""Marker API.

Each domain exposes ``cmd_*`` functions returning a ``StageResult``.
"""
