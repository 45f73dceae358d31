"""Calendar and Julian Date arithmetic."""
