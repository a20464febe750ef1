"""Status bar widget logic for river, the tray, sndio, UPower, temperature and clock."""

__version__ = "0.1.0"