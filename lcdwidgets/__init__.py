"""Window tree, layout helpers, themes and static widgets for fixed-size colour LCD screens."""

__version__ = "0.1.0"