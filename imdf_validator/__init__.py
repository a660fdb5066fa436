"""IMDF Archive Validator.

Loads Indoor Mapping Data Format (IMDF) archives, a set of GeoJSON
feature collections describing the interior of a venue, and validates
geometry, property schemas, controlled vocabularies, and cross-collection
identifier references into a deterministic diagnostic report.
"""

__version__ = "0.1.0"
