"""Pure helpers shared by the repositories and the routes."""
