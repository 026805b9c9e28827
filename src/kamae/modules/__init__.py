"""Core models: catalog, selection session, installation plan."""
