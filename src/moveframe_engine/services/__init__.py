"""Planning services built on the field parsers."""
