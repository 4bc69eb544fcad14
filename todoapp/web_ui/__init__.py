"""NiceGUI web runtime: page sessions, page layout and the CLI entrypoint."""
