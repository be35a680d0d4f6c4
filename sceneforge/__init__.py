"""A small scene graph: actors, components, levels, OBJ mesh loading, ray picking and a console."""

__version__ = "0.1.0"