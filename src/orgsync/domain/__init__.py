"""Domain layer: model, ports and entity update reconciliation."""
