"""chroma_checker.core: foundation layer.

Contains the colour converter, contrast maths, value types, palette parser,
settings and report builder.
This module has NO dependencies on chroma_checker.engine, chroma_checker.commands
or chroma_checker.registry. Only stdlib, numpy, and PIL are allowed here.
"""
