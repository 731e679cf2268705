"""
Bulk comment analyzer CLI package.

This package contains a small CLI tool that:
- splits pasted or uploaded social-media comments into platform, username and
  comment text,
- writes the normalized batch to a YAML/JSON file,
- sends the batch to an external sentiment/purchase-intent analysis service.
"""
