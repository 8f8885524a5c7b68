"""Cross-cutting concerns: configuration, logging, metrics and wiring."""
