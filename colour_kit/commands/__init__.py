"""Command modules.

Every module here that defines a `command` object is registered by
colour_kit.registry.discover().
"""
