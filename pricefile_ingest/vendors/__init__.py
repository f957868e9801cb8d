"""
Vendor metadata sub-package for pricefile-ingest.

Contains one YAML file per supported vendor with descriptive metadata
(display name, supported file formats, human-readable rule summaries).
The registry module (vendor_registry.py in the parent package) reads
these files for listing and introspection. Transformation logic lives
in ``pricefile_ingest/transformers/`` and never reads them.
"""
