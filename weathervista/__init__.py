"""WeatherVista: weather dashboard client and credential-hiding proxy gateway."""

__version__ = "0.1.0"
