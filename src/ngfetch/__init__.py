"""ngfetch - host facts and installed toolchains at a glance."""

__version__ = "1.0.0"
