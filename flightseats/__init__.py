"""Flight seat map and passenger list management with an interactive console."""

__version__ = "1.0.0"
__all__ = ["cli", "flight", "loader", "passenger", "seat"]