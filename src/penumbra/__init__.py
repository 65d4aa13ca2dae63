"""penumbra: a soft-shadow ray tracer with a threaded render scheduler."""

__version__ = "0.1.0"
