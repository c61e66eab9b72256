"""REST API exposing notes and folders to the frontend."""
