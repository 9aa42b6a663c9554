"""gaussian-catalog: a catalogue of quantum-chemistry calculation metadata."""

__version__ = "0.1.0"
