"""pulsarhawk - terminal dashboard for Apache Pulsar clusters."""

__version__ = "0.1.0"
