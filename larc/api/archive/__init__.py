"""Archive domain: artifact naming, lookup, persistence and the per-cluster workflow."""
