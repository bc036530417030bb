"""Core logic for dnhealth: versions, catalog, analysis and scan sequencing."""
