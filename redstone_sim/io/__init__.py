"""Wire codec, report schemas, and output path conventions."""
