"""Application framework: typed events, input state, a pyglet window layer, loggers, 3D math and ASCII rendering."""

__version__ = "1.0.0"