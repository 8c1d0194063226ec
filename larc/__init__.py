"""larc - archive the web resources a text document links to."""
