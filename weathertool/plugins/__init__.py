"""Built-in tool plugins discovered by the plugin loader."""
