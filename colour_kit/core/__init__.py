"""colour_kit.core: Foundation layer.

Contains the colour model, GPL export, file sinks, configuration, CLI types
and the report builder. This module has NO dependencies on
colour_kit.commands or colour_kit.registry. Only stdlib and numpy are
allowed here.
"""
