"""Version 1 routes, mounted without a prefix."""
