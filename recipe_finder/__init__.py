"""
Recipe finder backend for the restaurant website.

Responsibilities:
- Serve the fixed recipe catalog shown on the menu page.
- Match a visitor's on-hand ingredients against the catalog ("what can I make").
- Return full recipe details for the detail view.
"""
