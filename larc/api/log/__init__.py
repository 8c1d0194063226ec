"""Log domain - unified append-only logfile."""
