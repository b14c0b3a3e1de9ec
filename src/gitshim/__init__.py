"""Point third-party Git GUI clients at a git shim."""
