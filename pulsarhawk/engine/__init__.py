"""Event-driven core: channel, events and the single-writer dispatcher."""
