"""Grid data model, search and component discovery."""
