"""careerlog - tooling for the 海外キャリアログ podcast."""

__version__ = "0.1.0"
