"""
Recipe catalog and ingredient matching.

Responsibilities:
- Load the fixed recipe catalog once and serve it read-only.
- Match visitor ingredients against each recipe and rank by coverage.
- Look up a single recipe for the detail view.
"""
