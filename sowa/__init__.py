"""Core building blocks of a small 2D game engine: math, colours, timers, a virtual filesystem, logging, YAML documents, input state, resources and project settings."""

__version__ = "0.1.0"