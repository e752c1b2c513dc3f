"""Table models for game server databases: DDL scripts, INSERT dumps and safe SELECTs."""

__version__ = "0.1.0"