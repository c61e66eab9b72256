"""User-facing interfaces built on the notebook facade."""
