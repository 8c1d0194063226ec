"""Queue domain: operation scheduling, resource sub-queues and process running."""
