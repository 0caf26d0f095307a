"""
xcstrings-codegen: typed Swift accessors generated from String Catalogs.

The generator core lives in `xcstrings_codegen.generator`; the catalog
reader, settings and CLI wrap it for build integration.
"""

from xcstrings_codegen.generator import GeneratorConfig, generate

__version__ = "0.3.0"

__all__ = ["GeneratorConfig", "generate", "__version__"]
