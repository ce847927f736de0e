"""Fleet telemetry monitor: averages and threshold alerts for vehicle data."""

__version__ = "1.0.0"
