"""Configuration defaults, loading, and validation for akshelper.

Main components:
- defaults: validation bounds and default runtime configurations
- loader: load cluster definitions from JSON or YAML files
- validator: validate cluster definitions and translate their failures

Submodules are imported directly; ``loader`` and ``validator`` depend on
the cluster models, which in turn depend on ``defaults``.
"""
