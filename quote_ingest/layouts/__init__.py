"""
Field-layout definitions sub-package for quote-ingest.

Contains one YAML file per supported (provider, market) pair, mapping
semantic quote fields to 0-based token indices of that provider's wire
format. The loader module (layout_registry.py in the parent package)
reads these files once per process.
"""
